import json
import logging

from wordlet.utils.game_logger import GameLogger, summarize_response


class FakeRequest:
    remote_addr = '10.0.0.1'
    endpoint = 'game.make_guess'
    method = 'POST'
    url = 'http://localhost/api/game/g-1/guess'


def read_entries(logger):
    for handler in logger.logger.handlers:
        handler.flush()
    lines = logger.log_file.read_text(encoding='utf-8').splitlines()
    return [json.loads(line.split(' | ', 2)[2]) for line in lines if line.strip()]


def test_structured_entries_and_stats(tmp_path):
    logger = GameLogger(str(tmp_path / 'logs'))
    request = FakeRequest()

    logger.log_user_action(request, 'submit_guess', 'g-1', guess='slump')
    logger.log_server_response(request, 'submit_guess', True, {
        'success': True,
        'state': {'status': 'LOST', 'guesses': ['a'] * 6, 'answer': 'slump', 'current_round': 6},
    }, 'g-1')
    logger.log_game_event('g-1', 'game_lost', request.remote_addr, rounds_used=6)
    logger.log_error(request, ValueError('boom'), 'submit_guess', 'g-1')

    entries = read_entries(logger)
    assert [e['event_type'] for e in entries] == [
        'USER_ACTION', 'SERVER_RESPONSE_SUCCESS', 'GAME_EVENT', 'ERROR',
    ]
    assert entries[0]['user']['user_ip'] == '10.0.0.1'
    assert entries[0]['details']['guess'] == 'slump'

    logged_state = entries[1]['details']['response_data']['state']
    assert logged_state['guesses_count'] == 6
    assert logged_state['answer_revealed'] is True
    assert 'answer' not in logged_state

    assert entries[3]['details']['error_type'] == 'ValueError'

    stats = logger.get_log_stats()
    assert stats['total_entries'] == 4
    assert stats['user_actions'] == 1
    assert stats['server_responses'] == 1
    assert stats['game_events'] == 1
    assert stats['errors'] == 1


def test_summarize_response_hides_the_answer():
    summary = summarize_response({
        'success': True,
        'message': "Game over! The answer was 'slump'.",
        'state': {'status': 'LOST', 'won': False, 'guesses': ['admit'] * 6, 'answer': 'slump'},
    })
    assert summary['message'] == "Game over! The answer was 'slump'."
    assert summary['state']['status'] == 'LOST'
    assert summary['state']['guesses_count'] == 6
    assert summary['state']['answer_revealed'] is True
    assert 'slump' not in summary['state'].values()

    assert summarize_response(['not', 'a', 'dict']) == {'data_type': 'list'}


def test_log_level_comes_from_a_name(tmp_path):
    assert GameLogger(str(tmp_path), 'debug').level == logging.DEBUG
    assert GameLogger(str(tmp_path), 'nonsense').level == logging.INFO
    assert GameLogger(str(tmp_path), 'warning').logger.level == logging.WARNING
    GameLogger(str(tmp_path), 'info')
