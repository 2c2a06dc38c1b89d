"""
Tests for the interactive command loop, driven by scripted operator input.
"""

import pytest

from flashquiz import constants
from flashquiz.cli.interpreter import (
    Command,
    CommandInterpreter,
    parse_command,
    parse_count,
)
from flashquiz.exceptions import (
    CardFileWriteError,
    InvalidCountError,
    MalformedCardFileError,
)
from flashquiz.models import FlashCard

ACTION = constants.PROMPT_ACTION


def run_session(session):
    CommandInterpreter(session).run()
    return session


@pytest.mark.parametrize(
    "text, expected",
    [
        ("add", Command.ADD),
        ("ADD", Command.ADD),
        ("Hardest Card", Command.HARDEST_CARD),
        ("reset STATS", Command.RESET_STATS),
        ("exit", Command.EXIT),
        ("hardest_card", None),
        (" add", None),
        ("", None),
    ],
)
def test_parse_command(text, expected):
    assert parse_command(text) is expected


def test_parse_count():
    assert parse_count("3") == 3
    assert parse_count("-1") == -1
    with pytest.raises(InvalidCountError):
        parse_count("three")


@pytest.mark.parametrize("text", ["1_0", " 3", "3 ", "+3", "\u0663"])
def test_parse_count_rejects_loose_integer_syntax(text):
    with pytest.raises(InvalidCountError):
        parse_count(text)


def test_action_prompt_text():
    assert ACTION == (
        "Input the action (add, remove, import, export, ask, exit, log, "
        "hardest_card, reset_stats)"
    )


class TestLoop:
    def test_exit_only(self, make_session, printed_lines):
        session = run_session(make_session("exit"))
        assert printed_lines(session) == [ACTION, "Bye bye!"]

    def test_unknown_action_then_separator(self, make_session, printed_lines):
        session = run_session(make_session("fly", "exit"))
        assert printed_lines(session) == [
            ACTION,
            "Action not recognized. Please try again.",
            "",
            ACTION,
            "Bye bye!",
        ]

    def test_step_reports_exit(self, make_session):
        interpreter = CommandInterpreter(make_session("log", "x.txt", "EXIT"))
        assert interpreter.step() is True
        assert interpreter.step() is False

    def test_transcript_records_input_and_output(self, make_session):
        session = run_session(make_session("hello", "exit"))
        assert session.transcript.lines == [
            ACTION,
            "hello",
            "Action not recognized. Please try again.",
            "",
            ACTION,
            "exit",
            "Bye bye!",
        ]


class TestAddRemove:
    def test_add_card(self, make_session, printed_lines):
        session = run_session(make_session("add", "cat", "meow", "exit"))

        assert printed_lines(session)[:5] == [
            ACTION,
            "The card:",
            "The definition of the card:",
            'The pair ("cat":"meow") has been added.',
            "",
        ]
        card = session.store.find_by_term("cat")
        assert card.definition == "meow"
        assert card.error_count == 0

    def test_duplicate_term_skips_definition_prompt(
        self, make_session, printed_lines, sample_cards
    ):
        session = run_session(
            make_session("add", "France", "exit", cards=sample_cards)
        )
        assert printed_lines(session)[:4] == [
            ACTION,
            "The card:",
            'The card "France" already exists.',
            "",
        ]
        assert len(session.store) == 3

    def test_duplicate_definition(self, make_session, printed_lines, sample_cards):
        session = run_session(
            make_session("add", "Italy", "Paris", "exit", cards=sample_cards)
        )
        assert 'The definition "Paris" already exists.' in printed_lines(session)
        assert session.store.find_by_term("Italy") is None
        assert len(session.store) == 3

    def test_remove_card(self, make_session, printed_lines, sample_cards):
        session = run_session(
            make_session("remove", "Japan", "exit", cards=sample_cards)
        )
        assert "The card has been removed." in printed_lines(session)
        assert [c.term for c in session.store] == ["France", "Peru"]

    def test_remove_missing_card(self, make_session, printed_lines, sample_cards):
        session = run_session(
            make_session("remove", "Mars", "exit", cards=sample_cards)
        )
        assert printed_lines(session)[:4] == [
            ACTION,
            "Which card?",
            'Can\'t remove "Mars": there is no such card.',
            "",
        ]
        assert len(session.store) == 3


class TestFiles:
    def test_export_then_import(self, make_session, printed_lines, sample_cards, tmp_path):
        target = str(tmp_path / "cards.txt")
        session = run_session(
            make_session("export", target, "exit", cards=sample_cards)
        )
        assert "3 cards have been saved." in printed_lines(session)

        fresh = run_session(make_session("import", target, "exit"))
        assert "3 cards have been loaded." in printed_lines(fresh)
        assert [(c.term, c.error_count) for c in fresh.store] == [
            ("France", 0),
            ("Japan", 2),
            ("Peru", 1),
        ]

    def test_import_missing_file(self, make_session, printed_lines):
        session = run_session(make_session("import", "missing.txt", "exit"))
        assert printed_lines(session)[:4] == [
            ACTION,
            "File name:",
            "File not found.",
            "",
        ]

    def test_import_malformed_file_is_fatal(self, make_session, tmp_path):
        target = tmp_path / "bad.txt"
        target.write_text("a\nb\nlots\n", encoding="utf-8")
        session = make_session("import", str(target))
        with pytest.raises(MalformedCardFileError):
            run_session(session)

    def test_export_empty_store(self, make_session, printed_lines, tmp_path):
        target = tmp_path / "cards.txt"
        session = run_session(make_session("export", str(target), "exit"))
        assert "0 cards have been saved." in printed_lines(session)
        assert not target.exists()

    def test_export_write_failure_is_fatal(self, make_session, sample_cards, tmp_path):
        session = make_session("export", str(tmp_path), cards=sample_cards)
        with pytest.raises(CardFileWriteError):
            run_session(session)

    def test_log_saves_transcript(self, make_session, tmp_path):
        target = tmp_path / "log.txt"
        session = run_session(make_session("fly", "log", str(target), "exit"))

        assert target.read_text(encoding="utf-8").splitlines() == [
            ACTION,
            "fly",
            "Action not recognized. Please try again.",
            "",
            ACTION,
            "log",
            "File name:",
            str(target),
        ]
        # The confirmation comes after the dump, so it is only in memory.
        assert session.transcript.lines[8] == "The log has been saved."

    def test_exit_exports_to_pending_path(self, make_session, printed_lines, sample_cards, tmp_path):
        target = tmp_path / "on_exit.txt"
        session = make_session("exit", cards=sample_cards)
        session.pending_export_path = str(target)
        run_session(session)

        assert printed_lines(session) == [ACTION, "Bye bye!", "3 cards have been saved."]
        assert target.read_text(encoding="utf-8").startswith("France\nParis\n0\n")


class TestAsk:
    def test_ask_rounds(self, make_session, printed_lines):
        cards = [FlashCard(term="France", definition="Paris")]
        session = run_session(make_session("ask", "2", "Paris", "Rome", "exit", cards=cards))
        assert printed_lines(session)[:8] == [
            ACTION,
            "How many times to ask?",
            'Print the definition of "France":',
            "Correct!",
            'Print the definition of "France":',
            'Wrong. The right answer is "Paris".',
            "",
            ACTION,
        ]
        assert cards[0].error_count == 1

    def test_ask_names_other_card(self, make_session, printed_lines):
        cards = [FlashCard(term="France", definition="Paris")]
        session = make_session(
            "ask", "1", "Tokyo", "exit", cards=cards
        )
        session.store.add(FlashCard(term="Japan", definition="Tokyo"))
        # Always draw the first card.
        session.quiz.rng.choice = lambda seq: seq[0]
        run_session(session)
        assert (
            'Wrong. The right answer is "Paris", but your definition is '
            'correct for "Japan".'
        ) in printed_lines(session)

    def test_ask_zero_times(self, make_session, printed_lines):
        session = run_session(make_session("ask", "0", "exit"))
        assert printed_lines(session)[:3] == [ACTION, "How many times to ask?", ""]

    def test_ask_empty_store(self, make_session, printed_lines):
        session = run_session(make_session("ask", "2", "exit"))
        assert printed_lines(session)[:4] == [
            ACTION,
            "How many times to ask?",
            "There are no cards to ask about.",
            "",
        ]

    def test_ask_invalid_count_is_fatal(self, make_session):
        with pytest.raises(InvalidCountError):
            run_session(make_session("ask", "many"))


class TestStatistics:
    def _cards(self, counts):
        return [
            FlashCard(term=f"t{i}", definition=f"d{i}", error_count=n)
            for i, n in enumerate(counts)
        ]

    def test_hardest_card_plural(self, make_session, printed_lines):
        session = run_session(
            make_session("hardest card", "exit", cards=self._cards([0, 2, 2, 1]))
        )
        assert printed_lines(session)[1] == (
            'The hardest cards are "t1", "t2". You have 2 errors answering them'
        )

    def test_hardest_card_single(self, make_session, printed_lines):
        session = run_session(
            make_session("hardest card", "exit", cards=self._cards([0, 5, 1]))
        )
        assert printed_lines(session)[1] == (
            'The hardest card is "t1". You have 5 errors answering it'
        )

    @pytest.mark.parametrize("counts", [[], [0, 0, 0]])
    def test_hardest_card_no_errors(self, make_session, printed_lines, counts):
        session = run_session(
            make_session("hardest card", "exit", cards=self._cards(counts))
        )
        assert printed_lines(session)[1] == "There are no cards with errors."

    def test_reset_stats_then_hardest_card(self, make_session, printed_lines):
        session = run_session(
            make_session(
                "reset stats", "hardest card", "exit", cards=self._cards([3, 1])
            )
        )
        assert printed_lines(session) == [
            ACTION,
            "Card statistics have been reset.",
            "",
            ACTION,
            "There are no cards with errors.",
            "",
            ACTION,
            "Bye bye!",
        ]
