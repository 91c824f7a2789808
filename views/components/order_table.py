"""
Service order table and its add/edit/delete dialogs.
"""

import streamlit as st
from typing import Callable, Optional

from models.order import Order, OrderDraft, STATUS_OPTIONS
from services.order_service import SaveResult
from views.components.badges import order_status_badge

COLUMNS = [2, 2, 3, 1.5, 1.5]


def render_order_table_header():
    """Render the table header row."""
    for col, title in zip(st.columns(COLUMNS), ["Cliente", "Vehículo", "Servicio", "Estado", ""]):
        with col:
            st.caption(title)


def render_order_row(
    order: Order,
    on_edit: Callable[[int], None],
    on_delete: Callable[[int], None],
):
    """
    Render a single order row with edit/delete actions.

    Args:
        order: The order to show
        on_edit: Called with the order id when "edit" is clicked
        on_delete: Called with the order id when "delete" is clicked
    """
    col_client, col_vehicle, col_service, col_status, col_actions = st.columns(COLUMNS)

    with col_client:
        st.markdown(f"**{order.client}**")
    with col_vehicle:
        st.markdown(order.vehicle)
    with col_service:
        st.markdown(order.service)
    with col_status:
        st.markdown(order_status_badge(order.status))
    with col_actions:
        edit_col, delete_col = st.columns(2)
        with edit_col:
            if st.button("✏️", key=f"edit_order_{order.id}", help="Editar"):
                on_edit(order.id)
        with delete_col:
            if st.button("🗑️", key=f"delete_order_{order.id}", help="Eliminar"):
                on_delete(order.id)


def _render_order_form(
    draft: OrderDraft,
    order_id: Optional[int],
    on_save: Callable[[OrderDraft, Optional[int]], SaveResult],
):
    """Form body shared by the add and edit dialogs."""
    client = st.text_input("Cliente", value=draft.client, key=f"order_form_client_{order_id or 'new'}")
    vehicle = st.text_input("Vehículo", value=draft.vehicle, key=f"order_form_vehicle_{order_id or 'new'}")
    service = st.text_input("Servicio", value=draft.service, key=f"order_form_service_{order_id or 'new'}")
    status_label = st.selectbox(
        "Estado",
        STATUS_OPTIONS,
        index=STATUS_OPTIONS.index(draft.status_label) if draft.status_label in STATUS_OPTIONS else 0,
        key=f"order_form_status_{order_id or 'new'}",
    )

    submit_text = "Guardar cambios" if order_id else "Crear orden"
    col_cancel, col_submit = st.columns(2)

    with col_cancel:
        if st.button("Cancelar", use_container_width=True):
            st.rerun()

    with col_submit:
        submitted = st.button(submit_text, type="primary", use_container_width=True)

    if submitted:
        with st.spinner("Guardando..."):
            result = on_save(
                OrderDraft(client=client, vehicle=vehicle, service=service, status_label=status_label),
                order_id,
            )
        if result.success:
            st.rerun()
        st.error(result.error)


@st.dialog("Agregar orden")
def add_order_dialog(on_save: Callable[[OrderDraft, Optional[int]], SaveResult]):
    """Modal to create an order."""
    _render_order_form(OrderDraft(), None, on_save)


@st.dialog("Editar orden")
def edit_order_dialog(
    draft: OrderDraft,
    order_id: int,
    on_save: Callable[[OrderDraft, Optional[int]], SaveResult],
):
    """Modal to edit an order."""
    _render_order_form(draft, order_id, on_save)


@st.dialog("Eliminar orden")
def confirm_delete_order_dialog(order: Order, on_confirm: Callable[[int], bool]):
    """Ask before deleting an order."""
    st.markdown("¿Eliminar esta orden?")
    st.caption(f"{order.client} · {order.vehicle} · {order.service}")

    col_cancel, col_delete = st.columns(2)
    with col_cancel:
        if st.button("Cancelar", use_container_width=True):
            st.rerun()
    with col_delete:
        if st.button("Eliminar", type="primary", use_container_width=True):
            on_confirm(order.id)
            st.rerun()
