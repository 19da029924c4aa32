"""
Tests for the game HTTP endpoints.
"""

from wordle_game.config.game_settings import WORD_LENGTH
from wordle_game.services import game_service as game_service_module


def _new_game(client, index=0):
    response = client.post('/api/new_game', json={'answer_word_index': index})
    assert response.status_code == 200
    return response.get_json()['game_id']


def _press(client, game_id, key):
    return client.post(f'/api/game/{game_id}/action', json={'key': key})


def _play_guess(client, game_id, word):
    for letter in word:
        _press(client, game_id, letter)
    response = _press(client, game_id, 'Enter')
    while response.get_json()['state']['animation'] is not None:
        response = client.post(f'/api/game/{game_id}/action', json={'type': 'AnimationStep'})
    return response.get_json()


class TestNewGame:

    def test_new_game_with_index(self, client):
        response = client.post('/api/new_game', json={'answer_word_index': 1})
        data = response.get_json()

        assert response.status_code == 200
        assert data['success'] is True
        assert data['state']['answer_word_index'] == 1
        assert data['state']['guesses'] == []
        assert data['state']['answer'] is None
        assert len(data['state']['current_guess_cells']) == WORD_LENGTH

    def test_new_game_without_body_uses_daily_word(self, client):
        response = client.post('/api/new_game')
        assert response.status_code == 200
        assert 0 <= response.get_json()['state']['answer_word_index'] < 5

    def test_new_game_rejects_bad_index(self, client):
        for index in (99, -1, "2", True):
            response = client.post('/api/new_game', json={'answer_word_index': index})
            assert response.status_code == 400
            assert response.get_json()['success'] is False

    def test_new_game_rejects_non_object_body(self, client):
        response = client.post('/api/new_game', json=[1])
        assert response.status_code == 400
        assert response.get_json()['success'] is False

    def test_service_unavailable(self, client, monkeypatch):
        monkeypatch.setattr(game_service_module, '_game_service', None)

        response = client.post('/api/new_game', json={})
        assert response.status_code == 500
        assert response.get_json()['error'] == 'Game service unavailable'


class TestGameActions:

    def test_get_state(self, client):
        game_id = _new_game(client)
        response = client.get(f'/api/game/{game_id}/state')

        assert response.status_code == 200
        assert response.get_json()['state']['game_id'] == game_id

    def test_unknown_game(self, client):
        assert client.get('/api/game/missing/state').status_code == 404
        assert _press(client, 'missing', 'a').status_code == 404
        assert client.post('/api/game/missing/play_again').status_code == 404
        assert client.delete('/api/game/missing').status_code == 404

    def test_typing_letters(self, client):
        game_id = _new_game(client)

        data = _press(client, game_id, 'R').get_json()
        assert data['changed'] is True
        assert data['state']['current_guess'] == 'r'

        data = client.post(f'/api/game/{game_id}/action', json={'type': 'AppendLetter', 'letter': 'a'}).get_json()
        assert data['state']['current_guess'] == 'ra'

        data = _press(client, game_id, 'Backspace').get_json()
        assert data['state']['current_guess'] == 'r'

    def test_malformed_action(self, client):
        game_id = _new_game(client)

        response = client.post(f'/api/game/{game_id}/action', json={'type': 'Explode'})
        assert response.status_code == 400

        response = client.post(f'/api/game/{game_id}/action', data='not json')
        assert response.status_code == 400

    def test_invalid_submission(self, client):
        game_id = _new_game(client)
        for letter in 'xyzzy':
            _press(client, game_id, letter)

        data = _press(client, game_id, 'Enter').get_json()
        assert data['success'] is True
        assert data['changed'] is False
        assert data['invalid_submission'] is True
        assert all(cell['invalid_word'] for cell in data['state']['current_guess_cells'])

    def test_full_game_and_play_again(self, client):
        game_id = _new_game(client, 0)

        data = _play_guess(client, game_id, 'radar')
        assert data['state']['guesses'] == ['radar']
        assert data['state']['game_over'] is False

        data = _play_guess(client, game_id, 'crane')
        assert data['state']['won'] is True
        assert data['state']['answer'] == 'crane'
        assert data['state']['show_next_game_button'] is True
        assert all(cell['wave'] for cell in data['state']['grid'][1])

        data = client.post(f'/api/game/{game_id}/play_again').get_json()
        assert data['state']['answer_word_index'] == 1
        assert data['state']['guesses'] == []

    def test_play_again_after_loss_retries_same_word(self, client):
        game_id = _new_game(client, 0)
        for word in ('radar', 'stare', 'toast', 'tears', 'chair', 'dance'):
            data = _play_guess(client, game_id, word)

        assert data['state']['game_over'] is True
        assert data['state']['won'] is False
        assert data['state']['message'] == 'Sorry, you lost :('

        data = client.post(f'/api/game/{game_id}/play_again').get_json()
        assert data['state']['answer_word_index'] == 0
        assert data['state']['guesses'] == []

    def test_delete_game(self, client):
        game_id = _new_game(client)

        assert client.delete(f'/api/game/{game_id}').get_json()['success'] is True
        assert client.get(f'/api/game/{game_id}/state').status_code == 404


class TestHealth:

    def test_health(self, client):
        _new_game(client)
        data = client.get('/api/health').get_json()

        assert data['status'] == 'healthy'
        assert data['active_games'] == 1
        assert data['word_statistics']['total_words'] == 5
