"""Tests for the command-line scratchpad."""

import pytest

from controllers.cli_controller import CLIController


@pytest.fixture
def cli(engine):
    return CLIController(engine, session_key="cli")


def only_deck(cli):
    return cli.engine.get_state("cli").decks[0]


class TestCLIController:

    def test_starts_empty_session(self, cli):
        assert cli.show_state()[0].startswith("===== SESSION cli (0/10 decks)")

    def test_templates(self, cli):
        assert cli.execute("templates") == ["Empty", "Numbers", "Pair"]

    def test_add_and_draw(self, cli):
        cli.execute("add Numbers")
        deck = only_deck(cli)

        out = cli.execute(f"draw {deck.id} 3")

        deck = only_deck(cli)
        assert len(deck.cards) == 7
        assert any(line.strip().startswith("last draw:") for line in out)

    def test_draw_rejects_bad_count(self, cli):
        cli.execute("add Numbers")

        assert cli.execute(f"draw {only_deck(cli).id} many") == ["Count must be a whole number."]

    def test_failed_command_reports_status(self, cli):
        assert cli.execute("add Missing") == ["Nothing changed (not found)."]

    def test_move_specific_card(self, cli):
        cli.execute("add Numbers")
        cli.execute("add Pair")
        state = cli.engine.get_state("cli")
        source, target = state.decks
        card_id = source.cards[0].id

        cli.execute(f"move {source.id} {target.id} {card_id}")

        target = cli.engine.get_state("cli").find_deck(target.id)
        assert target.cards[-1].id == card_id

    def test_merge(self, cli):
        cli.execute("add Numbers")
        cli.execute("add Pair")
        one, two = cli.engine.get_state("cli").decks

        cli.execute(f"merge {one.id} {two.id}")

        assert [d.id for d in cli.engine.get_state("cli").decks] == [one.id]

    def test_unknown_command(self, cli):
        out = cli.execute("juggle")

        assert out[0] == "Unknown command: juggle"

    def test_blank_and_unbalanced_input(self, cli):
        assert cli.execute("   ") == []
        assert cli.execute('add "Pair').pop(0).startswith("Invalid input")

    def test_run_loop(self, cli, monkeypatch, capsys):
        lines = iter(["add Pair", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

        cli.run()

        assert "Pair: 2 cards" in capsys.readouterr().out
