"""
Streamlit UI for the Order Desk.

Features:
- Order estimator with an editable item grid and quote breakdown
- Pickup time checker showing how stored date/time text is read
- Holiday calendar for planning
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path
from datetime import date, datetime

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from order_desk.config.settings import get_settings
from order_desk.engine import LineItem, calculate_order
from order_desk.scheduling import ValidInstant, parse_instant
from order_desk.scheduling.formatting import format_date_for_display, format_time_12_hour
from order_desk.scheduling.holidays import get_us_holidays


st.set_page_config(
    page_title="Order Desk",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


try:
    settings = get_settings_cached()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SIDEBAR: Active Price List
# ============================================================================
with st.sidebar:
    st.header("💲 Price List")

    with st.container(border=True):
        st.markdown(f"**Mini:** ${settings.pricing.mini.base_price:.2f} each")
        for tier in settings.pricing.mini.tiers:
            st.caption(f"{tier.quantity} minis for ${tier.price:.2f}")
        st.markdown(f"**Full-size:** ${settings.pricing.full.base_price:.2f} each")
        for tier in settings.pricing.full.tiers:
            st.caption(f"{tier.quantity} full-size for ${tier.price:.2f}")
        st.markdown(
            f"**Salsa:** ${settings.pricing.salsa_small:.2f} small / "
            f"${settings.pricing.salsa_large:.2f} large"
        )

    st.caption(f"Settings file: `{settings.pricing_file}`")


# ============================================================================
# MAIN CONTENT: TABBED INTERFACE
# ============================================================================
st.title("Order Desk")
st.caption(f"v1.0 | {datetime.now().strftime('%Y-%m-%d')}")

tab1, tab2, tab3 = st.tabs(["🥟 Estimator", "🕑 Pickup Check", "📅 Holidays"])


# ============================================================================
# TAB 1: ORDER ESTIMATOR
# ============================================================================
with tab1:
    menu_names = list(settings.menu.mini_flavors) + [f"Full {f}" for f in settings.menu.full_flavors]
    starter = pd.DataFrame({
        "name": menu_names or ["Beef", "Full Beef", "Salsa Verde - Small (4oz)"],
        "quantity": 0,
    })

    col1, col2 = st.columns([1.6, 1.4], gap="large")

    with col1:
        st.subheader("Items")
        edited = st.data_editor(starter, num_rows="dynamic", use_container_width=True, key="items_grid")
        delivery_fee = st.number_input("Delivery Fee", min_value=0.0, value=0.0, step=1.0)

    items = [
        LineItem(name=str(row["name"]), quantity=int(row["quantity"]))
        for _, row in edited.iterrows()
        if pd.notna(row["name"]) and pd.notna(row["quantity"]) and int(row["quantity"]) > 0
    ]
    quote = calculate_order(items, delivery_fee, settings.pricing, settings.menu)

    with col2:
        st.subheader("Quote")
        st.metric("Total", f"${quote.total:,.2f}")

        m1, m2, m3 = st.columns(3)
        m1.metric("Minis", quote.mini_quantity, f"${quote.mini_total:,.2f}", delta_color="off")
        m2.metric("Full-size", quote.full_quantity, f"${quote.full_total:,.2f}", delta_color="off")
        m3.metric("Salsa", quote.small_salsa_quantity + quote.large_salsa_quantity,
                  f"${quote.salsa_total:,.2f}", delta_color="off")

        for warning in quote.warnings:
            st.warning(warning)

        with st.expander("🔍 Pricing Details"):
            for t in quote.trace:
                if t.value:
                    st.caption(f"**{t.step}**: {t.description} = `{t.value}`")
                else:
                    st.caption(f"**{t.step}**: {t.description}")


# ============================================================================
# TAB 2: PICKUP TIME CHECK
# ============================================================================
with tab2:
    st.subheader("Pickup Date/Time Parser")
    c1, c2 = st.columns(2)
    with c1:
        pickup_date = st.text_input("Pickup Date", value="03/05/2024")
    with c2:
        pickup_time = st.text_input("Pickup Time", value="2:30")

    instant = parse_instant(pickup_date, pickup_time)
    if isinstance(instant, ValidInstant):
        st.success(
            f"{format_date_for_display(instant.at.strftime('%Y-%m-%d'))} at "
            f"{format_time_12_hour(instant.at)}"
        )
    else:
        st.error("Invalid pickup date. This order is left out of date-filtered views.")


# ============================================================================
# TAB 3: HOLIDAYS
# ============================================================================
with tab3:
    year = st.number_input("Year", min_value=2000, max_value=2100, value=date.today().year, step=1)
    df_holidays = pd.DataFrame(
        [{"Date": h.date, "Holiday": h.name} for h in get_us_holidays(int(year))]
    ).sort_values("Date")
    st.dataframe(df_holidays, use_container_width=True, hide_index=True)
