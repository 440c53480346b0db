"""
Streamlit page for the rug quote calculator.

Rendering only: every number shown here comes from PriceModel.
"""
import logging
import streamlit as st
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from rug_quote.engine import PriceModel
from rug_quote.config.settings import get_settings
from rug_quote.storage import JsonFileStore


logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s %(message)s')

st.set_page_config(
    page_title="Calculadora de Alfombras",
    layout="centered",
)

settings = get_settings()


def _remember_quote(quote):
    st.session_state.quote = quote


if 'model' not in st.session_state:
    model = PriceModel(settings)
    model.subscribe(_remember_quote)
    model.initialize(JsonFileStore(settings.store_path))
    st.session_state.model = model

model: PriceModel = st.session_state.model
options = list(settings.dimension_options)

st.title("Calculadora de Alfombras")

# ============================================================================
# DIMENSIONS
# ============================================================================
col1, col2 = st.columns(2)
with col1:
    width = st.selectbox(
        "Ancho", options=options,
        index=options.index(model.state.width_cm),
        format_func=lambda d: f"{d} cm",
        key="width",
    )
with col2:
    height = st.selectbox(
        "Alto", options=options,
        index=options.index(model.state.height_cm),
        format_func=lambda d: f"{d} cm",
        key="height",
    )

if width != model.state.width_cm:
    model.set_width(width)
if height != model.state.height_cm:
    model.set_height(height)

# ============================================================================
# DESIGN LEVEL
# ============================================================================
st.subheader("Nivel de Diseño")
tier_cols = st.columns(max(len(model.tiers), 1))
for col, tier in zip(tier_cols, model.tiers):
    with col:
        with st.container(border=True):
            image_path = settings.assets_dir / tier.image_ref if tier.image_ref else None
            if image_path and image_path.exists():
                st.image(str(image_path))
            selected = tier.id == model.state.selected_tier_id
            if st.button(
                tier.name,
                key=f"tier_{tier.id}",
                type="primary" if selected else "secondary",
            ):
                model.select_tier(tier.id)
                st.rerun()

# ============================================================================
# QUOTE
# ============================================================================
quote = st.session_state.get('quote') or model.compute_quote()

with st.container(border=True):
    st.subheader("Cotización")
    st.metric("Total", model.format_currency(quote.total_price))
    st.markdown("**Detalle del cálculo:**")
    for line in quote.breakdown:
        st.caption(f"{line.step}: {line.description}")

with st.expander("📊 Precios por medida"):
    grid = model.price_grid()
    st.dataframe(grid)
    st.download_button(
        "📥 CSV",
        data=grid.to_csv(),
        file_name=f"precios_{model.state.selected_tier_id}.csv",
        mime="text/csv",
    )

st.caption(
    "El precio calculado es una estimación orientativa. El valor final puede variar "
    "según el diseño, nivel de detalle y materiales seleccionados, para una cotización "
    "más precisa enviar un mensaje por instagram."
)
st.link_button(settings.instagram_handle, settings.instagram_url)
