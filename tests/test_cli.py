"""Tests for agents, rendering and the interactive loop."""

import pytest

from connectk import cli
from connectk.agents import HumanAgent, RandomAgent, SearchAgent
from connectk.engine import PLAYER_X, PRESETS
from conftest import play


class TestAgents:
    def test_random_agent_is_seeded(self, standard):
        a = RandomAgent("a", seed=7)
        b = RandomAgent("b", seed=7)
        picks = [a.select_move(standard) for _ in range(20)]
        assert picks == [b.select_move(standard) for _ in range(20)]
        assert set(picks) <= set(standard.valid_moves())

    def test_random_agent_avoids_full_columns(self, tiny):
        play(tiny, [0, 0, 0, 2, 2, 2])
        agent = RandomAgent("r", seed=0)
        assert {agent.select_move(tiny) for _ in range(10)} == {1}

    def test_search_agent_reports(self, standard):
        seen = []
        agent = SearchAgent("ab", engine="minimax", depth=1, report=seen.append)
        col = agent.select_move(standard)
        assert seen and seen[0].column == col
        assert agent.last_result is seen[0]

    def test_search_agent_validates(self):
        with pytest.raises(ValueError):
            SearchAgent("bad", engine="mcts")
        with pytest.raises(ValueError):
            SearchAgent("bad", depth=-2)

    def test_human_agent_delegates(self, tiny):
        agent = HumanAgent("h", lambda s, name: 2)
        assert agent.select_move(tiny) == 2


class TestRendering:
    def test_render_board(self, tiny):
        play(tiny, [0, 1])
        assert cli.render_board(tiny) == "\n".join([". . .", ". . .", "X O .", "-----", "1 2 3"])

    def test_format_move_history(self, tiny):
        play(tiny, [0, 2])
        assert cli.format_move_history(tiny.moves) == "0:X@1 1:O@3"

    @pytest.mark.parametrize("raw,expected", [("1", 0), (" 3 ", 2), ("0", None), ("4", None), ("x", None), ("", None)])
    def test_parse_column(self, raw, expected):
        assert cli._parse_column(raw, 3) == expected


class TestPrompt:
    def test_reprompts_until_valid(self, tiny, monkeypatch, capsys):
        play(tiny, [0, 0, 0])
        answers = iter(["abc", "9", "1", "2"])
        monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
        assert cli.prompt_for_human_move(tiny, "Player X") == 1
        out = capsys.readouterr().out
        assert "Column is full" in out
        assert "between 1 and 3" in out


class TestPlayGame:
    def test_search_agents_finish_game(self, capsys):
        x = SearchAgent("AlphaBeta X", engine="alphabeta", depth=4)
        o = SearchAgent("Minimax O", engine="minimax", depth=4)
        final = cli.play_game(PRESETS["tiny"], x, o)
        assert final.terminal_result().is_terminal
        out = capsys.readouterr().out
        assert "Result:" in out
        assert "Moves:" in out

    def test_winner_is_reported(self, capsys):
        # X stacks column 0, O stacks column 1: X connects first.
        x = HumanAgent("X", lambda s, name: 0)
        o = HumanAgent("O", lambda s, name: 1)
        final = cli.play_game(PRESETS["tiny"], x, o)
        assert final.winner() == PLAYER_X
        assert "Result: X wins" in capsys.readouterr().out

    def test_illegal_agent_move(self):
        x = HumanAgent("X", lambda s, name: 5)
        o = HumanAgent("O", lambda s, name: 0)
        with pytest.raises(ValueError, match="illegal column"):
            cli.play_game(PRESETS["tiny"], x, o)

    def test_main_with_computer_players(self, capsys):
        cli.main(["--board", "wide", "--x", "random", "--o", "alphabeta", "--depth", "3", "--seed", "1"])
        out = capsys.readouterr().out
        assert "visited" in out
        assert "Result:" in out

    def test_negative_depth_rejected(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["--depth", "-1"])
