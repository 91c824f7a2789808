"""
Inventory table and its add/edit/delete dialogs.
"""

import streamlit as st
from decimal import Decimal
from typing import Callable, Optional

from models.inventory import InventoryItem, InventoryDraft
from services.inventory_service import StockSummary
from services.order_service import SaveResult
from views.components.badges import stock_status_badge

COLUMNS = [3, 1.5, 2, 1.5, 1.2, 1.5, 1.3]


def render_stock_summary(summary: StockSummary):
    """Metrics row above the table."""
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Artículos", summary.total)
    with col2:
        st.metric("Bajo stock", summary.low_stock)
    with col3:
        st.metric("Agotados", summary.out_of_stock)
    with col4:
        st.metric("Valor inventario", f"${summary.inventory_value:,.2f}")


def render_inventory_table_header():
    """Render the table header row."""
    titles = ["Nombre", "SKU", "Proveedor", "Cantidad", "Precio", "Estado", ""]
    for col, title in zip(st.columns(COLUMNS), titles):
        with col:
            st.caption(title)


def render_inventory_row(
    item: InventoryItem,
    on_edit: Callable[[int], None],
    on_delete: Callable[[int], None],
):
    """
    Render a single inventory row.

    Quantity carries a warning marker while the article is still available
    but at or below its minimum stock.
    """
    cols = st.columns(COLUMNS)

    with cols[0]:
        st.markdown(f"**{item.name}**")
        if item.description:
            st.caption(item.description)
    with cols[1]:
        st.markdown(item.sku_display)
    with cols[2]:
        st.markdown(item.supplier_display)
    with cols[3]:
        if item.is_low_stock:
            st.markdown(
                f"{item.quantity} ⚠️",
                help=f"Stock mínimo: {item.min_stock}",
            )
        else:
            st.markdown(str(item.quantity))
    with cols[4]:
        st.markdown(f"${item.price:,.2f}")
    with cols[5]:
        st.markdown(stock_status_badge(item.stock, item.stock_label))
    with cols[6]:
        edit_col, delete_col = st.columns(2)
        with edit_col:
            if st.button("✏️", key=f"edit_item_{item.id}", help="Editar"):
                on_edit(item.id)
        with delete_col:
            if st.button("🗑️", key=f"delete_item_{item.id}", help="Eliminar"):
                on_delete(item.id)


def _render_item_form(
    draft: InventoryDraft,
    item_id: Optional[int],
    on_save: Callable[[InventoryDraft, Optional[int]], SaveResult],
):
    """Form body shared by the add and edit dialogs."""
    name = st.text_input("Nombre del artículo", value=draft.name, key=f"item_form_name_{item_id or 'new'}")
    sku = st.text_input("SKU", value=draft.sku, key=f"item_form_sku_{item_id or 'new'}")

    col_qty, col_min = st.columns(2)
    with col_qty:
        quantity = st.number_input(
            "Cantidad", min_value=0, step=1, value=int(draft.quantity), key=f"item_form_quantity_{item_id or 'new'}"
        )
    with col_min:
        min_stock = st.number_input(
            "Stock mínimo", min_value=0, step=1, value=int(draft.min_stock), key=f"item_form_min_stock_{item_id or 'new'}"
        )

    col_price, col_supplier = st.columns(2)
    with col_price:
        price = st.number_input(
            "Precio", min_value=0.0, step=0.01, format="%.2f",
            value=float(draft.price), key=f"item_form_price_{item_id or 'new'}",
        )
    with col_supplier:
        supplier = st.text_input("Proveedor", value=draft.supplier, key=f"item_form_supplier_{item_id or 'new'}")

    description = st.text_area("Descripción", value=draft.description, height=90, key=f"item_form_description_{item_id or 'new'}")

    submit_text = "Guardar cambios" if item_id else "Crear Artículo"
    col_cancel, col_submit = st.columns(2)

    with col_cancel:
        if st.button("Cancelar", use_container_width=True):
            st.rerun()

    with col_submit:
        submitted = st.button(submit_text, type="primary", use_container_width=True)

    if submitted:
        new_draft = InventoryDraft(
            name=name,
            sku=sku,
            quantity=int(quantity),
            min_stock=int(min_stock),
            price=Decimal(str(price)),
            supplier=supplier,
            description=description,
        )
        with st.spinner("Guardando..."):
            result = on_save(new_draft, item_id)
        if result.success:
            st.rerun()
        st.error(result.error)


@st.dialog("Agregar Artículo")
def add_item_dialog(on_save: Callable[[InventoryDraft, Optional[int]], SaveResult]):
    """Modal to create an article."""
    _render_item_form(InventoryDraft(), None, on_save)


@st.dialog("Editar Artículo")
def edit_item_dialog(
    draft: InventoryDraft,
    item_id: int,
    on_save: Callable[[InventoryDraft, Optional[int]], SaveResult],
):
    """Modal to edit an article."""
    _render_item_form(draft, item_id, on_save)


@st.dialog("Eliminar artículo")
def confirm_delete_item_dialog(item: InventoryItem, on_confirm: Callable[[int], bool]):
    """Ask before deleting an article."""
    st.markdown("¿Eliminar este artículo del inventario?")
    st.caption(f"{item.name} · SKU {item.sku_display}")

    col_cancel, col_delete = st.columns(2)
    with col_cancel:
        if st.button("Cancelar", use_container_width=True):
            st.rerun()
    with col_delete:
        if st.button("Eliminar", type="primary", use_container_width=True):
            on_confirm(item.id)
            st.rerun()
