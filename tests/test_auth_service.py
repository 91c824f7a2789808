"""
Tests for AuthService: form validation, login and registration flows.
"""

from __future__ import annotations

import json

import httpx
import pytest

from services.auth_service import (
    AuthService,
    passwords_mismatch,
    validate_login,
    validate_registration,
)
from tests.conftest import json_response


@pytest.mark.parametrize(
    "identifier, password, expected",
    [
        ("   ", "secret", "Usuario o email es obligatorio."),
        ("juan", "", "Ingresa tu contraseña."),
        ("juan", "x", None),
    ],
)
def test_validate_login(identifier, password, expected) -> None:
    assert validate_login(identifier, password) == expected


@pytest.mark.parametrize(
    "fields, expected",
    [
        (("", "a@b.cl", "12345678", "12345678"), "El nombre de usuario es obligatorio."),
        (("juan", "no-es-email", "12345678", "12345678"), "Email inválido."),
        (("juan", "a@b.cl", "1234567", "1234567"), "La contraseña debe tener al menos 8 caracteres."),
        (("juan", "a@b.cl", "12345678", "87654321"), "Las contraseñas no coinciden. Verifica e inténtalo de nuevo."),
        (("juan", "a@b.cl", "12345678", "12345678"), None),
    ],
)
def test_validate_registration(fields, expected) -> None:
    assert validate_registration(*fields) == expected


def test_passwords_mismatch_only_when_both_filled() -> None:
    assert not passwords_mismatch("abc", "")
    assert not passwords_mismatch("abc", "abc")
    assert passwords_mismatch("abc", "abd")


def test_login_success_loads_profile_with_new_token(make_api) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/auth/login/":
            return json_response(200, {"access": "new-access", "refresh": "new-refresh"})
        return json_response(200, {"id": 9, "username": "juan", "email": "juan@taller.cl"})

    api, sent = make_api(handler, token=None)

    result = AuthService(api).login("juan", "secreto")

    assert result.success
    assert result.tokens.access == "new-access"
    assert result.tokens.refresh == "new-refresh"
    assert result.user.username == "juan"
    assert result.message == "¡Bienvenido, juan!"
    assert json.loads(sent[0].content) == {"identifier": "juan", "password": "secreto"}
    assert sent[1].url.path == "/api/auth/me/"
    assert sent[1].headers["Authorization"] == "Bearer new-access"


def test_login_validation_skips_api(make_api) -> None:
    api, sent = make_api(lambda r: json_response(200, {}))

    result = AuthService(api).login("", "x")

    assert not result.success
    assert result.error == "Usuario o email es obligatorio."
    assert sent == []


def test_login_rejected_uses_detail(make_api) -> None:
    api, _ = make_api(lambda r: json_response(401, {"detail": "Usuario inactivo"}))

    result = AuthService(api).login("juan", "malo")

    assert not result.success
    assert result.error == "Usuario inactivo"


def test_login_rejected_without_detail(make_api) -> None:
    api, _ = make_api(lambda r: json_response(400, {"non_field_errors": ["x"]}))

    result = AuthService(api).login("juan", "malo")

    assert result.error == "Credenciales inválidas."


def test_login_network_error(make_api) -> None:
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    api, _ = make_api(handler)

    result = AuthService(api).login("juan", "x")

    assert result.error == "Error al iniciar sesión."


def test_register_success_uses_backend_message(make_api) -> None:
    api, sent = make_api(lambda r: json_response(201, {"message": "Cuenta creada"}))

    result = AuthService(api).register("juan", "juan@taller.cl", "12345678", "12345678")

    assert result.success
    assert result.message == "Cuenta creada"
    assert sent[0].url.path == "/api/register/"
    assert json.loads(sent[0].content) == {
        "username": "juan",
        "email": "juan@taller.cl",
        "password": "12345678",
        "password_confirm": "12345678",
    }


def test_register_success_default_message(make_api) -> None:
    api, _ = make_api(lambda r: json_response(201, {"id": 1}))

    result = AuthService(api).register("juan", "juan@taller.cl", "12345678", "12345678")

    assert result.message == "Usuario registrado con éxito."


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"email": ["Email en uso"], "password": ["Muy común"]}, "Muy común"),
        ({"email": ["Email en uso"], "username": ["Usuario en uso"]}, "Usuario en uso"),
        ({"email": ["Email en uso"]}, "Email en uso"),
        ({"detail": "Bloqueado"}, "Bloqueado"),
        ({"otro": "x"}, "Error en el registro."),
    ],
)
def test_register_error_priority(make_api, payload, expected) -> None:
    api, _ = make_api(lambda r: json_response(400, payload))

    result = AuthService(api).register("juan", "juan@taller.cl", "12345678", "12345678")

    assert not result.success
    assert result.error == expected
