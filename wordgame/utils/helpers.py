"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict


def get_user_identity(request_obj) -> Dict[str, str]:
    """Extract player identity information from a request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def error_payload(message: str) -> Dict:
    """Standard JSON body for a failed request or event."""
    return {
        'success': False,
        'error': message
    }
