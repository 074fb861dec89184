"""
Structured game log.

Every API call produces a USER_ACTION entry and a SERVER_RESPONSE_SUCCESS or
SERVER_RESPONSE_ERROR entry; wins, losses and deletions add GAME_EVENT
entries and unexpected failures add ERROR entries. Each entry is one JSON
document per line in a dated file under the configured log directory.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.app_config import Config
from .helpers import get_user_identity

LOGGER_NAME = 'wordle_game'

# Game state fields kept when a response is written to the log
_STATE_SUMMARY_FIELDS = ('status', 'difficulty', 'current_round', 'max_rounds', 'game_over', 'won')


class GameLogger:
    """Writes JSON entries for user actions, responses and game events."""

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = _parse_level(level)
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now():%Y-%m-%d}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(self.level)

        # Re-creating the logger (tests, reloads) must not stack handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s', datefmt='%Y-%m-%d %H:%M:%S'
        ))

        # Console only shows problems
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _write(self, level: int, event_type: str, action: str,
               user_info: Dict[str, Optional[str]], details: Dict[str, Any]) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """Record an incoming request; extra keyword arguments go into the details."""
        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }
        self._write(logging.INFO, 'USER_ACTION', action, get_user_identity(request), details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Record the JSON body returned for an action. Failed responses are logged as errors."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': summarize_response(response_data),
            **kwargs
        }
        if success:
            self._write(logging.INFO, 'SERVER_RESPONSE_SUCCESS', action, get_user_identity(request), details)
        else:
            self._write(logging.ERROR, 'SERVER_RESPONSE_ERROR', action, get_user_identity(request), details)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str, **kwargs):
        user_info = {'user_ip': user_ip, 'session_id': None, 'username': None}
        self._write(logging.INFO, 'GAME_EVENT', event, user_info, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self._write(logging.ERROR, 'ERROR', action, get_user_identity(request), details)

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries by event type, for the health endpoint."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }
        counters = (
            ('"event_type": "USER_ACTION"', 'user_actions'),
            ('"event_type": "SERVER_RESPONSE', 'server_responses'),
            ('"event_type": "GAME_EVENT"', 'game_events'),
            ('"event_type": "ERROR"', 'errors'),
        )

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    for marker, key in counters:
                        if marker in line:
                            stats[key] += 1
                            break
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


def summarize_response(data: Any) -> Dict[str, Any]:
    """
    Shrink a response body for logging.

    A full game state is replaced by a summary, so a lost game's answer is
    recorded as `answer_revealed` rather than the word itself.
    """
    if not isinstance(data, dict):
        return {'data_type': type(data).__name__}

    summary = data.copy()
    state = summary.get('state')
    if isinstance(state, dict):
        summary['state'] = {field: state.get(field) for field in _STATE_SUMMARY_FIELDS}
        summary['state']['guesses_count'] = len(state.get('guesses', []))
        summary['state']['answer_revealed'] = state.get('answer') is not None
    return summary


def _parse_level(level) -> int:
    if isinstance(level, int):
        return level
    parsed = logging.getLevelName(str(level).upper())
    return parsed if isinstance(parsed, int) else logging.INFO


game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
