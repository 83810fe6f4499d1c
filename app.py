"""
Balatro Solver Web App
Streamlit interface for classifying hands and sampling hand statistics.
"""

import pandas as pd
import streamlit as st

from balatro_solver.engine.deck import parse_cards
from balatro_solver.engine.hand_detector import HandKind, find_best_poker_hand
from balatro_solver.engine.scoring import score_breakdown
from balatro_solver.presets import PRESETS
from balatro_solver.stats import fresh_draw_stats

# Page config
st.set_page_config(
    page_title="Balatro Solver",
    page_icon="🃏",
    layout="wide"
)

st.title("🃏 Balatro Solver")
st.markdown("*Poker hand detection, scoring and Monte Carlo hand frequencies*")

# Sidebar for settings
st.sidebar.header("Rules")

preset_options = list(PRESETS.keys())
selected_preset = st.sidebar.selectbox(
    "Preset",
    options=preset_options,
    format_func=lambda x: PRESETS[x].name
)

preset = PRESETS[selected_preset]
st.sidebar.markdown(f"*{preset.description}*")
options = preset.options

st.divider()

# Hand classifier
st.subheader("Evaluate a Hand")
card_text = st.text_input("Cards (e.g. AS KS QS JS TS)", value="AS KS QS JS TS")

if card_text.strip():
    try:
        cards = parse_cards(card_text)
    except ValueError as e:
        st.error(str(e))
    else:
        kind, hand = find_best_poker_hand(cards, options)
        breakdown = score_breakdown(kind, hand)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Hand", kind.label)
        with col2:
            st.metric("Scoring Cards", str(hand))
        with col3:
            st.metric("Score", f"{breakdown.score:g}")
        st.code(str(breakdown))

st.divider()

# Hand statistics
st.subheader("Hand Frequencies")
num_samples = st.slider("Number of Hands", min_value=1_000, max_value=100_000,
                        value=10_000, step=1_000)

if st.button("🎲 Sample Hands", type="primary"):
    with st.spinner("Sampling hands..."):
        report = fresh_draw_stats(num_samples, options, single_threaded=True)

    chart_data = pd.DataFrame({
        'Hand': [kind.label for kind in sorted(report.stats)],
        'Frequency %': [report.stats[kind].frequency * 100 for kind in sorted(report.stats)],
        'Avg Score': [report.stats[kind].average_score for kind in sorted(report.stats)],
        'EV': [report.stats[kind].expected_value for kind in sorted(report.stats)],
    })

    st.dataframe(chart_data, hide_index=True)
    st.bar_chart(chart_data.set_index('Hand')['Frequency %'])

    missing = [kind.label for kind in HandKind if kind not in report.stats]
    if missing:
        st.caption(f"Not seen in {num_samples:,} hands: {', '.join(missing)}")

# Footer
st.divider()
st.markdown("*Built with Balatro Solver engine*")
