"""User-facing wording for engine outcomes."""

from typing import Optional, Tuple

from .models import Outcome


# Message levels double as click colours in the CLI
LEVEL_COLORS = {
    'success': 'green',
    'info': 'blue',
    'warning': 'yellow',
    'error': 'red',
}

OUTCOME_MESSAGES = {
    Outcome.SUCCESS: ("Done.", 'success'),
    Outcome.INVALID_NAME: ("Please enter a valid name.", 'error'),
    Outcome.CAPACITY_REJECTED: ("The player limit has been reached.", 'warning'),
    Outcome.DUPLICATE_REJECTED: ("{name} is already on the list.", 'warning'),
    Outcome.NOT_FOUND: ("{name} is not on the list.", 'warning'),
    Outcome.TRUNCATED: ("Only the first {capacity} players were kept.", 'info'),
    Outcome.PRECONDITION_FAILURE: ("You need {remaining} more players.", 'error'),
}


def message_for(outcome: Outcome, **context) -> Tuple[str, str]:
    """Get the message text and level for an outcome.

    Args:
        outcome: Engine outcome code
        **context: Values for the message placeholders (``name``,
            ``remaining``, ``capacity``); missing ones get a generic word

    Returns:
        Tuple of (text, level)
    """
    template, level = OUTCOME_MESSAGES[outcome]
    values = {'name': 'That player', 'remaining': 'more', 'capacity': 'allowed'}
    values.update({key: value for key, value in context.items() if value is not None})
    return template.format(**values), level


def progress_message(remaining: int, total: int) -> Optional[Tuple[str, str]]:
    """Milestone notice after a player is added, if one applies.

    Args:
        remaining: Open slots left
        total: Players needed in total

    Returns:
        Tuple of (text, level), or None when there is nothing to announce
    """
    if remaining == 0:
        return "List complete. You can generate the teams now.", 'success'
    if remaining == 1:
        return "1 player left to complete the list.", 'info'
    if remaining == total // 2:
        return f"Halfway there. {remaining} players to go.", 'info'
    return None


def bulk_message(summary: dict, remaining: int, total: int) -> Tuple[str, str]:
    """Message after pasting or loading several names at once."""
    added = len(summary['added'])
    if added == 0:
        if summary['rejected']:
            return message_for(Outcome.CAPACITY_REJECTED)
        return "No new valid names were found.", 'error'
    if remaining == 0:
        return "List complete. You can generate the teams now.", 'success'
    if remaining <= total // 2:
        return f"Good progress. Only {remaining} players to go.", 'info'
    return f"Added {added} players.", 'success'
