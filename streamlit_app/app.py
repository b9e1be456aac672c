"""myHealth Coach — Streamlit dashboard for the deterministic planners.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import streamlit as st

from training_engine.coaching.form_cues import lookup_form_cues
from training_engine.math.one_rep_max import estimate_one_rep_max, set_feedback, set_volume
from training_engine.math.periodization import calculate_periodization, phase_counts
from training_engine.models.enums import (
    BlockGoal,
    CardioType,
    Equipment,
    ExperienceLevel,
    PlanGoal,
    SchedulePriority,
    SplitType,
)
from training_engine.planning.hybrid_schedule import optimize_hybrid_schedule, schedule_tips
from training_engine.planning.plan_generator import (
    exercise_id_for,
    generate_plan,
    split_explanation,
)
from training_engine.planning.split_recommender import best_choice, recommend_splits
from training_engine.rules.effort import interpret_effort
from training_engine.rules.progression import build_recommendation
from training_engine.serialization import plan_payload, to_json_string

from helpers import (
    TREND_COLORS,
    format_rep_range,
    format_weight,
    list_profiles,
    load_profile,
    periodization_rows,
    phase_color,
    plan_table_rows,
    save_profile,
    schedule_cells,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="myHealth Coach",
    page_icon="🏋️",
    layout="wide",
)


def _bump_widget_version() -> None:
    """Increment widget version counter to force Streamlit to recreate widgets.

    Widgets remember their old value under the same key, so a loaded profile
    would be ignored. A version counter in every key makes them new widgets.
    """
    st.session_state["_wv"] = st.session_state.get("_wv", 0) + 1


def _wk(name: str) -> str:
    """Return a versioned widget key like ``goal_v0``."""
    v = st.session_state.get("_wv", 0)
    return f"{name}_v{v}"


def _get_pdata(key: str, default):
    """Get value from loaded profile data, or return default."""
    return st.session_state.get("profile_data", {}).get(key, default)


def _index_of(options: list[str], value: str) -> int:
    return options.index(value) if value in options else 0


# ---------------------------------------------------------------------------
# Sidebar — Athlete Profile
# ---------------------------------------------------------------------------

st.sidebar.title("Athlete Profile")

_levels = [level.value for level in ExperienceLevel]
_plan_goals = [goal.value for goal in PlanGoal]
_splits = [split.value for split in SplitType]

with st.sidebar.expander("Training Plan", expanded=True):
    experience_level = st.selectbox(
        "Experience level", _levels,
        index=_index_of(_levels, _get_pdata("experience_level", "intermediate")),
        key=_wk("level"),
    )
    available_days = st.number_input(
        "Training days per week", 2, 6, int(_get_pdata("available_days", 4)),
        key=_wk("days"),
    )
    plan_goal = st.selectbox(
        "Goal", _plan_goals,
        index=_index_of(_plan_goals, _get_pdata("plan_goal", "hypertrophy")),
        key=_wk("plan_goal"),
    )
    split_type = st.selectbox(
        "Split", _splits,
        index=_index_of(_splits, _get_pdata("split_type", "upper_lower")),
        key=_wk("split"),
    )
    include_cardio = st.checkbox(
        "Add an easy run day", value=bool(_get_pdata("include_cardio", False)),
        key=_wk("cardio"),
    )

_block_goals = [goal.value for goal in BlockGoal]

with st.sidebar.expander("Training Block", expanded=True):
    total_weeks = st.number_input(
        "Block weeks", 4, 16, int(_get_pdata("total_weeks", 8)), key=_wk("weeks"),
    )
    block_goal = st.selectbox(
        "Block goal", _block_goals,
        index=_index_of(_block_goals, _get_pdata("block_goal", "strength")),
        key=_wk("block_goal"),
    )
    include_deload = st.checkbox(
        "Include deload", value=bool(_get_pdata("include_deload", True)),
        key=_wk("deload"),
    )

_cardio_types = [cardio.value for cardio in CardioType]
_priorities = [priority.value for priority in SchedulePriority]

with st.sidebar.expander("Hybrid Week"):
    strength_days = st.number_input(
        "Strength days", 2, 4, int(_get_pdata("strength_days", 3)), key=_wk("str_days"),
    )
    cardio_days = st.number_input(
        "Cardio days", 1, 3, int(_get_pdata("cardio_days", 2)), key=_wk("car_days"),
    )
    cardio_type = st.selectbox(
        "Cardio type", _cardio_types,
        index=_index_of(_cardio_types, _get_pdata("cardio_type", "running")),
        key=_wk("car_type"),
    )
    priority = st.selectbox(
        "Prioritize", _priorities,
        index=_index_of(_priorities, _get_pdata("priority", "balanced")),
        key=_wk("priority"),
    )


def _collect_profile_from_sidebar() -> dict:
    """Collect all sidebar widget values into a dict."""
    return {
        "experience_level": experience_level,
        "available_days": int(available_days),
        "plan_goal": plan_goal,
        "split_type": split_type,
        "include_cardio": include_cardio,
        "total_weeks": int(total_weeks),
        "block_goal": block_goal,
        "include_deload": include_deload,
        "strength_days": int(strength_days),
        "cardio_days": int(cardio_days),
        "cardio_type": cardio_type,
        "priority": priority,
    }


with st.sidebar.expander("Load / Save Profile"):
    profiles = list_profiles()
    if profiles:
        selected_profile = st.selectbox("Load profile", ["(none)"] + profiles)
        if st.button("Load") and selected_profile != "(none)":
            st.session_state["profile_data"] = load_profile(selected_profile)
            _bump_widget_version()
            st.rerun()
    else:
        st.caption("No saved profiles yet.")

    save_name = st.text_input("Save as", value="my_profile")
    if st.button("Save Profile"):
        save_profile(save_name, _collect_profile_from_sidebar())
        st.success(f"Saved as '{save_name}'")


# ---------------------------------------------------------------------------
# Main content — 4 tabs
# ---------------------------------------------------------------------------

st.title("myHealth Coach")
st.caption("Strength and hybrid training plans — powered by deterministic rules")

tab_plan, tab_block, tab_week, tab_set = st.tabs(
    ["Training Plan", "Periodization", "Hybrid Week", "Set Coach"]
)

# ---------------------------------------------------------------------------
# Tab 1: Training Plan
# ---------------------------------------------------------------------------

with tab_plan:
    recommendations = recommend_splits(experience_level, int(available_days))
    choice = best_choice(recommendations)
    if recommendations:
        st.subheader("Recommended Splits")
        for rec in recommendations:
            marker = "⭐ " if rec.split == choice else ""
            st.markdown(f"{marker}**{rec.split}** — {rec.reason}")
    else:
        st.warning("No split template fits that many days.")

    if st.button("Generate Plan", type="primary"):
        st.session_state["last_plan"] = generate_plan(
            name=f"{plan_goal.title()} {split_type}",
            split_type=split_type,
            days_per_week=int(available_days),
            goal=plan_goal,
            include_cardio=include_cardio,
        )

    plan = st.session_state.get("last_plan")
    if plan is not None:
        st.header(plan.name)
        st.markdown(split_explanation(plan.split_type, plan_goal))
        c1, c2 = st.columns(2)
        c1.metric("Days generated", str(plan.day_count))
        c2.metric("Days requested", str(plan.days_per_week))
        st.dataframe(plan_table_rows(plan), use_container_width=True, hide_index=True)
        st.download_button(
            "Download Plan (.json)",
            data=to_json_string(plan_payload(plan)),
            file_name=f"{plan.id}.json",
            mime="application/json",
        )
    else:
        st.info("Click **Generate Plan** to build a training plan.")

# ---------------------------------------------------------------------------
# Tab 2: Periodization
# ---------------------------------------------------------------------------

with tab_block:
    weeks = calculate_periodization(int(total_weeks), block_goal, include_deload)
    counts = phase_counts(weeks)
    cols = st.columns(len(counts))
    for col, (phase, count) in zip(cols, counts.items()):
        col.metric(phase, f"{count} wk")

    st.markdown(
        "".join(
            f'<span style="background:{phase_color(w.phase)};padding:6px 10px;'
            f'margin:1px;border-radius:4px;display:inline-block;">{w.week}</span>'
            for w in weeks
        ),
        unsafe_allow_html=True,
    )
    st.dataframe(periodization_rows(weeks), use_container_width=True, hide_index=True)

# ---------------------------------------------------------------------------
# Tab 3: Hybrid Week
# ---------------------------------------------------------------------------

with tab_week:
    schedule = optimize_hybrid_schedule(
        int(strength_days), int(cardio_days), cardio_type, priority
    )
    st.subheader("Week at a Glance")
    cols = st.columns(7)
    for col, (day, activity, notes, color) in zip(cols, schedule_cells(schedule)):
        with col:
            st.markdown(
                f'<div style="background:{color};padding:10px;border-radius:8px;'
                f'text-align:center;min-height:110px;">'
                f"<strong>{day}</strong><br>{activity}<br>"
                f"<small>{notes}</small></div>",
                unsafe_allow_html=True,
            )

    placed = sum(1 for entry in schedule if "Body" in entry.activity)
    if placed < strength_days:
        st.warning(
            f"Only {placed} of {strength_days} strength sessions fit around the cardio days."
        )

    st.subheader("Tips")
    for tip in schedule_tips(priority):
        st.markdown(f"- {tip}")

# ---------------------------------------------------------------------------
# Tab 4: Set Coach
# ---------------------------------------------------------------------------

with tab_set:
    c1, c2 = st.columns(2)
    with c1:
        exercise_name = st.text_input("Exercise", value="Bench Press")
        equipment = st.selectbox("Equipment", [e.value for e in Equipment])
        weight = st.number_input("Weight (kg)", 0.5, 500.0, 80.0, step=0.5)
        reps = st.number_input("Reps", 1, 50, 8)
    with c2:
        effort = st.text_input("How did it feel?", value="felt solid")
        interpretation = interpret_effort(effort)
        st.caption(f"Interpreted as RPE {interpretation.rpe}: {interpretation.reasoning}")
        rpe = st.slider("RPE", 1, 10, interpretation.rpe)

    m1, m2, m3 = st.columns(3)
    m1.metric("Estimated 1RM", format_weight(estimate_one_rep_max(weight, int(reps))))
    m2.metric("Volume", format_weight(set_volume(weight, int(reps))))
    m3.metric("RPE", str(rpe))
    st.info(set_feedback(rpe))

    rec = build_recommendation(
        exercise_id=exercise_id_for(exercise_name),
        exercise_name=exercise_name,
        last_weight=weight,
        last_reps=int(reps),
        last_rpe=rpe,
        equipment=equipment,
    )
    st.subheader("Next Session")
    st.markdown(
        f'<div style="border-left:6px solid {TREND_COLORS[rec.trend]};padding:6px 12px;">'
        f"<strong>{format_weight(rec.recommended_weight)}</strong> for "
        f"{format_rep_range(rec.recommended_reps)} reps<br>"
        f"<small>{rec.reasoning}</small></div>",
        unsafe_allow_html=True,
    )

    matched, cues = lookup_form_cues(exercise_name)
    st.subheader(f"Form Cues ({matched})")
    for cue in cues:
        st.markdown(f"- {cue}")
