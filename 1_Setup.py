import streamlit as st

from app_types import Hand
from constants import (
    COL_HAND,
    COL_SKILL,
    DEFAULT_COURT_RATE,
    DEFAULT_HOURS_PLAYED,
    DEFAULT_NUM_COURTS,
    DEFAULT_SHUTTLE_COUNT,
    DEFAULT_SHUTTLE_PRICE,
    DEFAULT_SKILL,
    PLAYERS_PER_MATCH,
    ROSTER_FILE_TYPES,
    SKILL_LEVELS,
)
from exceptions import BadmintonAppError
from logger import setup_logging
from player_registry import create_roster_dataframe, read_roster_file, split_roster_rows
from session_logic import Roster
from session_service import create_new_session

setup_logging()

st.set_page_config(layout="wide", page_title="Badminton Setup")

st.title("🏸 Badminton Doubles Pairing")

# Initialize roster if not exists (do this early)
if 'roster' not in st.session_state:
    st.session_state.roster = Roster()

roster = st.session_state.roster


def refresh_editor():
    """Rebuilds the editor DataFrame from the roster."""
    st.session_state.editor_df = create_roster_dataframe(roster.players)


if 'editor_df' not in st.session_state:
    refresh_editor()

# --- Main Setup UI ---
st.header("Session Setup")
st.subheader("1. Manage Players")
st.info("Add players one at a time, upload a CSV/Excel file, or edit the table directly.")

# --- Single Player Entry ---
with st.form(key="add_player_form", clear_on_submit=True):
    cols = st.columns([3, 1, 1, 1], vertical_alignment="bottom")
    with cols[0]:
        new_name = st.text_input("Player Name", key="add_name")
    with cols[1]:
        new_hand = st.selectbox("Hand", options=[h.value for h in Hand], key="add_hand")
    with cols[2]:
        new_skill = st.selectbox(
            "Skill", options=SKILL_LEVELS, index=SKILL_LEVELS.index(DEFAULT_SKILL), key="add_skill"
        )
    with cols[3]:
        add_submitted = st.form_submit_button("➕ Add", use_container_width=True)

    if add_submitted:
        try:
            player = roster.add_player(new_name, new_hand, int(new_skill))
            refresh_editor()
            st.success(f"Added {player.name}.")
        except BadmintonAppError as e:
            st.warning(str(e))

# --- File Upload Logic ---
uploaded_file = st.file_uploader("Upload Players (CSV or Excel)", type=ROSTER_FILE_TYPES)
if uploaded_file is not None:
    # Only process if it's a new file (prevent re-processing on reruns)
    file_id = f"{uploaded_file.name}_{uploaded_file.size}"
    if st.session_state.get('last_uploaded_file_id') != file_id:
        st.session_state.last_uploaded_file_id = file_id
        try:
            imported = read_roster_file(uploaded_file, uploaded_file.name)
            added = roster.extend(imported)
            refresh_editor()
            st.success(f"Imported {added} player(s) from {uploaded_file.name}.")
        except BadmintonAppError as e:
            st.error(f"An error occurred while processing the file: {e}")

# --- Display the data editor ---
column_config = {
    COL_HAND: st.column_config.SelectboxColumn(
        COL_HAND,
        help="Player's playing hand",
        options=[h.value for h in Hand],
        default=Hand.RIGHT.value,
        required=True,
    ),
    COL_SKILL: st.column_config.NumberColumn(
        COL_SKILL,
        help="Skill level from 1 (beginner) to 5 (strongest)",
        default=DEFAULT_SKILL,
        min_value=min(SKILL_LEVELS),
        max_value=max(SKILL_LEVELS),
        step=1,
        required=True,
    ),
}

edited_df = st.data_editor(
    st.session_state.editor_df,
    column_config=column_config,
    disabled=["#"],
    hide_index=True,
    num_rows="dynamic",
    use_container_width=True,
    key="player_editor",
)

col_confirm, col_clear = st.columns(2)
with col_confirm:
    if st.button("✅ Confirm Player List", use_container_width=True):
        try:
            edited_players, skipped_rows = split_roster_rows(edited_df)
        except BadmintonAppError as e:
            st.error(str(e))
            st.stop()
        st.session_state.roster = Roster(edited_players)
        st.session_state.editor_df = create_roster_dataframe(edited_players)
        st.session_state.show_success = True
        st.session_state.skipped_rows = skipped_rows
        st.rerun()
with col_clear:
    if st.button("🗑️ Clear Player List", use_container_width=True):
        roster.clear()
        refresh_editor()
        st.rerun()

# Show success message if flag is set
if st.session_state.get('show_success', False):
    st.success("Player list saved!")
    # Clear the flag so message doesn't persist
    st.session_state.show_success = False

if st.session_state.get('skipped_rows', 0):
    st.warning(
        f"{st.session_state.skipped_rows} row(s) were removed because they had no name, "
        "an unknown hand or a skill outside 1-5."
    )
    st.session_state.skipped_rows = 0

if len(roster) % PLAYERS_PER_MATCH != 0:
    st.warning(
        f"{len(roster)} players is not a multiple of {PLAYERS_PER_MATCH}: "
        f"{len(roster) % PLAYERS_PER_MATCH} player(s) will sit out each pairing."
    )

# --- Session Start Logic ---
st.subheader("2. Courts & Costs")

# Initialize persistent settings (survive returning from the session page)
defaults = {
    'num_courts_input': DEFAULT_NUM_COURTS,
    'hours_played_input': DEFAULT_HOURS_PLAYED,
    'court_rate_input': DEFAULT_COURT_RATE,
    'shuttle_count_input': DEFAULT_SHUTTLE_COUNT,
    'shuttle_price_input': DEFAULT_SHUTTLE_PRICE,
}
for key, value in defaults.items():
    if key not in st.session_state:
        st.session_state[key] = value

cols = st.columns(5)
with cols[0]:
    num_courts = st.number_input("Number of Courts", min_value=1, step=1, key="num_courts_input")
with cols[1]:
    hours_played = st.number_input("Hours Played", min_value=0, step=1, key="hours_played_input")
with cols[2]:
    court_rate = st.number_input("Court Rate / Hour", min_value=0, step=10, key="court_rate_input")
with cols[3]:
    shuttle_count = st.number_input("Shuttlecocks Used", min_value=0, step=1, key="shuttle_count_input")
with cols[4]:
    shuttle_price = st.number_input("Price / Shuttlecock", min_value=0, step=1, key="shuttle_price_input")

if st.button("🚀 Start Session", type="primary"):
    if not len(st.session_state.roster):
        st.error("Player list is empty. Please add players before starting.")
        st.stop()

    try:
        st.session_state.session = create_new_session(
            st.session_state.roster,
            num_courts=num_courts,
            hours_played=hours_played,
            court_rate=court_rate,
            shuttle_count=shuttle_count,
            shuttle_price=shuttle_price,
        )
    except BadmintonAppError as e:
        st.error(str(e))
        st.stop()

    st.switch_page("pages/2_Session.py")
