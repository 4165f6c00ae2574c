"""
Session aggregation of round outcomes
"""
from typing import Optional

from quote_quiz.models import SessionState


def record_round(session: SessionState, final_round_points: int) -> SessionState:
    """
    Fold one finished round into the session totals

    Args:
        session: Current totals
        final_round_points: Points the round ended with

    Returns:
        New SessionState (the input is not modified)
    """
    return SessionState(
        total_points=session.total_points + final_round_points,
        rounds_played=session.rounds_played + 1
    )


def average_points(session: SessionState) -> Optional[float]:
    """Average points per round, None before the first round"""
    if session.rounds_played == 0:
        return None
    return session.total_points / session.rounds_played
