import streamlit as st

from app_types import SessionSettings
from constants import TEAM_NAME_SEPARATOR
from cost import format_currency
from exceptions import BadmintonAppError
from grouping import TIER_DESCRIPTIONS, TIER_ORDER
from logger import setup_logging
from session_service import export_schedule_to_excel, schedule_to_dataframe

setup_logging()

st.set_page_config(
    initial_sidebar_state="collapsed",
    layout="wide"
)

# --- Page Entry Logic ---
if 'session' not in st.session_state:
    st.error("No active session found. Please set up a session first.")
    st.switch_page("1_Setup.py")

session = st.session_state.session
st.title(f"🏸 Doubles Session ({len(session.roster)} players)")

col1, col2 = st.columns([2, 1])

with col1:
    st.header("Pairing")

    if session.has_incomplete_group:
        st.warning(
            f"The number of players is not a multiple of 4: "
            f"{session.leftover_count} player(s) will sit out. Add players to fill every group."
        )

    if st.button("🔀 Shuffle & Pair", type="primary"):
        session.shuffle_and_pair()
        st.rerun()

    if session.pairing is not None:
        if session.pairing.dropped_count:
            dropped_names = ", ".join(p.name for p in session.pairing.dropped_players)
            st.info(f"**Sitting out round {session.round_num}:** {dropped_names}")

        for tier in TIER_ORDER:
            st.subheader(TIER_DESCRIPTIONS[tier])
            halves = session.groups[tier]
            if not halves:
                st.caption("No teams in this group.")
            for half in halves:
                with st.container(border=True):
                    st.markdown(f"**Team:** {TEAM_NAME_SEPARATOR.join(half.team.names)} (skill: {half.team_skill})")
                    st.caption(f"Hands: {half.hands}")

with col2:
    st.header("Cost")
    try:
        summary = session.cost_summary()
        st.metric("Total Cost", format_currency(summary.total_cost))
        st.metric("Per Person", format_currency(summary.cost_per_person))
        st.caption(
            f"Court: {format_currency(summary.total_court_cost)} | "
            f"Shuttlecocks: {format_currency(summary.total_shuttle_cost)}"
        )
    except BadmintonAppError as e:
        st.error(str(e))

st.header("Court Schedule")
if st.button("📋 Generate Court Schedule", disabled=session.pairing is None):
    try:
        session.generate_schedule()
        st.rerun()
    except BadmintonAppError as e:
        st.error(str(e))

if session.schedule:
    st.dataframe(
        schedule_to_dataframe(session.schedule),
        hide_index=True,
        use_container_width=True,
    )
    st.download_button(
        "⬇️ Download Schedule (Excel)",
        data=export_schedule_to_excel(session),
        file_name=f"court_schedule_round_{session.round_num}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

# --- Session Management in Sidebar ---
with st.sidebar:
    st.header("Manage Session")

    with st.expander("🎾 Courts & Costs", expanded=False):
        settings = session.settings
        new_courts = st.number_input("Courts", min_value=1, step=1, value=int(settings.num_courts))
        new_hours = st.number_input("Hours Played", min_value=0.0, value=float(settings.hours_played))
        new_rate = st.number_input("Court Rate / Hour", min_value=0.0, value=float(settings.court_rate))
        new_count = st.number_input("Shuttlecocks Used", min_value=0, step=1, value=int(settings.shuttle_count))
        new_price = st.number_input("Price / Shuttlecock", min_value=0.0, value=float(settings.shuttle_price))
        if st.button("Apply", key="apply_settings_btn", use_container_width=True):
            try:
                session.update_settings(
                    SessionSettings(
                        num_courts=new_courts,
                        hours_played=new_hours,
                        court_rate=new_rate,
                        shuttle_count=new_count,
                        shuttle_price=new_price,
                    )
                )
                st.rerun()
            except BadmintonAppError as e:
                st.error(str(e))

    if st.button("⬅️ Back to Setup"):
        del st.session_state['session']
        st.switch_page("1_Setup.py")
