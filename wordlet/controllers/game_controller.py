"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, jsonify, request

from ..models.game import GameDifficulty, GameNotFoundError, GameNotLostError, GameStatus, InvalidAnswerError
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import WELCOME_MESSAGE, describe_guess_result, describe_outcome, normalize_guess

game_bp = Blueprint('game', __name__)


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _bad_request(action, message, game_id=None):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 400


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return _bad_request('new_game', 'Request body must be a JSON object')

        difficulty_name = data.get('difficulty', current_app.config.get('DEFAULT_DIFFICULTY', 'easy'))
        if str(difficulty_name).lower() not in ('easy', 'hard'):
            return _bad_request('new_game', 'Invalid difficulty. Must be "easy" or "hard"')

        difficulty = GameDifficulty.from_name(difficulty_name)

        answer = data.get('answer') if current_app.config.get('TESTING') else None
        if answer is not None:
            if not isinstance(answer, str):
                return _bad_request('new_game', 'Answer must be a string')
            # Guesses are lowercased before they reach the game, so the answer must be too
            answer = normalize_guess(answer)

        game_logger.log_user_action(request, 'new_game', difficulty=difficulty.value)

        game_id = game_service.create_new_game(difficulty, answer=answer)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state),
            'message': WELCOME_MESSAGE
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            difficulty=state.difficulty, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except InvalidAnswerError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 400

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service):
    """Submit a guess for validation and evaluation."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            return _bad_request('submit_guess', 'Guess is required', game_id)

        guess = normalize_guess(data['guess'])

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        state, result = game_service.make_guess(game_id, guess)

        if not result.is_valid:
            error_response = {
                'success': False,
                'result': result.to_dict(),
                'error': describe_guess_result(result)
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=result.kind.value, attempted_guess=guess
            )
            return jsonify(error_response), 400

        status = GameStatus(state.status)
        response_data = {
            'success': True,
            'result': result.to_dict(),
            'state': asdict(state),
            'message': describe_outcome(status, state.answer) or ''
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, round=state.current_round, status=state.status
        )

        if status is GameStatus.WON:
            game_logger.log_game_event(
                game_id, 'game_won', request.remote_addr,
                rounds_used=state.current_round, winning_guess=guess
            )
        elif status is GameStatus.LOST:
            game_logger.log_game_event(
                game_id, 'game_lost', request.remote_addr,
                rounds_used=state.current_round, target_word=state.answer,
                final_guess=guess
            )

        return jsonify(response_data)

    except GameNotFoundError:
        return _not_found('submit_guess', game_id)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/answer', methods=['GET'])
@require_game_service
def get_answer(game_id, game_service):
    """Reveal the answer, only once the game has been lost."""
    try:
        game_logger.log_user_action(request, 'get_answer', game_id)

        answer = game_service.get_answer(game_id)
        response_data = {
            'success': True,
            'answer': answer
        }
        game_logger.log_server_response(request, 'get_answer', True, response_data, game_id)
        return jsonify(response_data)

    except GameNotFoundError:
        return _not_found('get_answer', game_id)

    except GameNotLostError as e:
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_answer', False, error_response, game_id)
        return jsonify(error_response), 409

    except Exception as e:
        game_logger.log_error(request, e, 'get_answer', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_answer', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), (200 if success else 404)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'games': len(game_service.games),
            'active_games': game_service.active_games,
            'dictionary_size': len(game_service.dictionary),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
