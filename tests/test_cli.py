"""Tests for command line parsing and the CLI modes."""
from argparse import Namespace
from unittest.mock import Mock, patch

import numpy as np

from cli.commands import play_mode, simulate_game, simulate_mode
from main import build_parser, main
from slidingtiles.constants import GameStatus


class TestArgumentParsing:
    """Command line options."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.mode == 'play'
        assert args.frontend is None
        assert args.seed is None
        assert args.animation_ms is None

    def test_play_options(self):
        args = build_parser().parse_args(
            ['--frontend', 'curses', '--seed', '3', '--animation-ms', '200'])
        assert args.frontend == 'curses'
        assert args.seed == 3
        assert args.animation_ms == 200

    def test_simulate_options(self):
        args = build_parser().parse_args(['--mode', 'simulate', '--games', '5'])
        assert args.mode == 'simulate'
        assert args.games == 5


class TestSimulateMode:
    """Headless random games."""

    def test_simulated_game_finishes(self):
        state = simulate_game(np.random.default_rng(0))
        assert state.score >= 0
        assert state.max_tile() >= 4
        assert state.status in (GameStatus.LOST, GameStatus.WON, GameStatus.PLAYING)

    def test_summary(self, capsys):
        summary = simulate_mode(Namespace(games=3, seed=1))
        assert summary['games'] == 3
        assert summary['best_score'] >= summary['avg_score']
        assert summary['best_tile'] >= 4
        assert "Simulation Results" in capsys.readouterr().out

    def test_seed_is_reproducible(self):
        first = simulate_mode(Namespace(games=2, seed=8))
        second = simulate_mode(Namespace(games=2, seed=8))
        assert first == second


class TestPlayMode:
    """Frontend selection."""

    def _settings(self, frontend='pygame'):
        settings = Mock()
        settings.get_frontend.return_value = frontend
        settings.get.side_effect = lambda key, default=None: {
            'animation.duration_ms': 500,
            'animation.poll_timeout_ms': 10,
            'video.cell_size': 72,
        }.get(key, default)
        return settings

    def test_curses_frontend(self):
        args = Namespace(frontend='curses', seed=2, animation_ms=None)
        with patch('game.game_loop.start_terminal_game',
                   return_value=GameStatus.LOST) as start:
            assert play_mode(args, self._settings()) is GameStatus.LOST
        start.assert_called_once_with(seed=2, duration_ms=500, poll_timeout_ms=10)

    def test_frontend_from_settings(self):
        args = Namespace(frontend=None, seed=None, animation_ms=250)
        with patch('game.game_loop.start_pygame_game',
                   return_value=GameStatus.PLAYING) as start:
            play_mode(args, self._settings('pygame'))
        start.assert_called_once_with(seed=None, duration_ms=250,
                                      poll_timeout_ms=10, cell_size=72)

    def test_unknown_frontend(self):
        args = Namespace(frontend='tk', seed=None, animation_ms=None)
        assert play_mode(args, self._settings()) is None


class TestMain:
    """Entry point wiring."""

    def test_log_level_from_settings_is_normalised(self, tmp_path, monkeypatch):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text('{"logging": {"level": "info"}}')
        monkeypatch.setattr('slidingtiles.utils.settings._settings_instance', None)

        with patch('main.logging.basicConfig') as basic_config, \
                patch('main.check_dependencies', return_value=True), \
                patch('main.simulate_mode') as simulate:
            main(['--mode', 'simulate', '--games', '1',
                  '--settings', str(settings_file)])

        assert basic_config.call_args.kwargs['level'] == 'INFO'
        assert basic_config.call_args.kwargs['filename'] is None
        simulate.assert_called_once()
