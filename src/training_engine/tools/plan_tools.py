"""plan-tools: program-level planning (plans, splits, blocks, hybrid weeks)."""

from __future__ import annotations

from training_engine.math.periodization import calculate_periodization, phase_counts
from training_engine.planning.hybrid_schedule import optimize_hybrid_schedule, schedule_tips
from training_engine.planning.plan_generator import generate_plan, split_explanation
from training_engine.planning.split_recommender import best_choice, recommend_splits
from training_engine.serialization.payload import (
    phase_week_payload,
    plan_payload,
    schedule_entry_payload,
    split_recommendation_payload,
)
from training_engine.tools.base import PLAN_SERVER, CoachTool
from training_engine.tools.schemas import (
    GeneratePlanArgs,
    HybridScheduleArgs,
    PeriodizationArgs,
    SplitRecommendationArgs,
)


class GeneratePlanTool(CoachTool):
    name = "generate_plan"
    description = (
        "Generate a personalized training plan based on goals, schedule, and preferences"
    )
    server = PLAN_SERVER
    args_model = GeneratePlanArgs

    def run(self, args: GeneratePlanArgs) -> dict:
        plan = generate_plan(
            name=args.name,
            split_type=args.split_type,
            days_per_week=args.days_per_week,
            goal=args.goal,
            include_cardio=args.include_cardio,
        )
        return {
            "success": True,
            "plan": plan_payload(plan),
            "summary": {
                "totalDays": plan.day_count,
                "exercisesPerDay": plan.exercises_per_day,
                "splitExplanation": split_explanation(args.split_type, args.goal),
            },
        }


class SplitRecommendationTool(CoachTool):
    """Rank splits for the athlete's experience and weekly availability.

    The goal is echoed back but does not change the ranking.
    """

    name = "get_split_recommendations"
    description = (
        "Get training split recommendations based on experience level and available days"
    )
    server = PLAN_SERVER
    args_model = SplitRecommendationArgs

    def run(self, args: SplitRecommendationArgs) -> dict:
        recommendations = recommend_splits(args.experience_level, args.available_days)
        return {
            "experienceLevel": args.experience_level.value,
            "availableDays": args.available_days,
            "goal": args.goal.value,
            "recommendations": [split_recommendation_payload(r) for r in recommendations],
            "bestChoice": best_choice(recommendations),
        }


class PeriodizationTool(CoachTool):
    name = "calculate_periodization"
    description = "Calculate periodization phases for a training block"
    server = PLAN_SERVER
    args_model = PeriodizationArgs

    def run(self, args: PeriodizationArgs) -> dict:
        weeks = calculate_periodization(
            args.total_weeks, args.goal, include_deload=args.include_deload
        )
        return {
            "totalWeeks": args.total_weeks,
            "goal": args.goal.value,
            "includesDeload": args.include_deload,
            "phases": [phase_week_payload(week) for week in weeks],
            "summary": {"phaseCounts": phase_counts(weeks)},
        }


class HybridScheduleTool(CoachTool):
    name = "optimize_hybrid_schedule"
    description = "Optimize a weekly schedule combining strength training and cardio"
    server = PLAN_SERVER
    args_model = HybridScheduleArgs

    def run(self, args: HybridScheduleArgs) -> dict:
        schedule = optimize_hybrid_schedule(
            args.strength_days, args.cardio_days, args.cardio_type, args.prioritize
        )
        return {
            "configuration": {
                "strengthDays": args.strength_days,
                "cardioDays": args.cardio_days,
                "cardioType": args.cardio_type.value,
                "priority": args.prioritize.value,
            },
            "schedule": [schedule_entry_payload(entry) for entry in schedule],
            "tips": schedule_tips(args.prioritize),
        }
