"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract client identity information from a request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),  # Set for WebSocket requests
    }


def parse_answer_word_index(value: Any) -> Optional[int]:
    """
    Validate an answer word index taken from a JSON body.

    Returns:
        The index, or None when the value is absent

    Raises:
        ValueError: If the value is not an integer
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("answer_word_index must be an integer")
    return value
