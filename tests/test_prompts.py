from __future__ import annotations

import unittest

from prompt_fakes import make_session, plain_output

from termsurvey.errors import InterruptError
from termsurvey.options import OptionSet
from termsurvey.prompts import Confirm, Input, Select, SelectionPrompt
from termsurvey.selection import SelectionMachine


class ConfirmPromptTests(unittest.TestCase):
    def _answer(self, line: str, default: bool = False) -> bool:
        session, _terminal, _output = make_session(lines=[line])
        return Confirm(message="Is pizza your favorite food?", default=default).prompt(session)

    def test_yes_forms_answer_true(self) -> None:
        for line in ("y", "Y", "yes", "YES", "Yes"):
            with self.subTest(line=line):
                self.assertTrue(self._answer(line))

    def test_no_forms_answer_false(self) -> None:
        for line in ("n", "N", "no", "No"):
            with self.subTest(line=line):
                self.assertFalse(self._answer(line, default=True))

    def test_empty_line_answers_default(self) -> None:
        self.assertTrue(self._answer("", default=True))
        self.assertFalse(self._answer("", default=False))

    def test_invalid_answer_is_reported_and_asked_again(self) -> None:
        session, terminal, output = make_session(lines=["maybe", "yes"])
        prompt = Confirm(message="Is pizza your favorite food?")

        self.assertTrue(prompt.prompt(session))

        text = plain_output(output)
        self.assertIn('✘ Sorry, your reply was invalid: "maybe" is not a valid answer, please try again.\n', text)
        self.assertTrue(text.endswith("? Is pizza your favorite food? (y/N) "))
        self.assertEqual(terminal.events, [("enter", False), ("exit", False)])

    def test_help_rune_shows_help_then_reads_again(self) -> None:
        session, _terminal, output = make_session(lines=["?", "n"])
        prompt = Confirm(message="Is pizza your favorite food?", help="This is helpful", default=True)

        self.assertFalse(prompt.prompt(session))
        self.assertIn("ⓘ This is helpful\n? Is pizza your favorite food? (Y/n) ", plain_output(output))

    def test_help_rune_without_help_is_invalid(self) -> None:
        session, _terminal, output = make_session(lines=["?", "y"])

        self.assertTrue(Confirm(message="Sure?").prompt(session))
        self.assertIn('"?" is not a valid answer', plain_output(output))

    def test_cleanup_renders_yes_no(self) -> None:
        session, _terminal, output = make_session()

        Confirm(message="Sure?").cleanup(session, True)

        self.assertEqual(plain_output(output), "? Sure? Yes\n")

    def test_template_override_is_used(self) -> None:
        session, _terminal, output = make_session(lines=["y"])
        prompt = Confirm(message="Sure?").set_template(lambda frame, _config: f"[{frame.message}]")

        prompt.prompt(session)

        self.assertEqual(plain_output(output), "[Sure?]")


class InputPromptTests(unittest.TestCase):
    def test_typed_line_is_answer(self) -> None:
        session, _terminal, _output = make_session(lines=["October"])

        self.assertEqual(Input(message="Month:", default="April").prompt(session), "October")

    def test_empty_line_answers_default(self) -> None:
        session, _terminal, output = make_session(lines=[""])

        self.assertEqual(Input(message="What is your favorite month:", default="April").prompt(session), "April")
        self.assertEqual(plain_output(output), "? What is your favorite month: (April) ")

    def test_empty_line_without_default_is_none(self) -> None:
        session, _terminal, _output = make_session(lines=[""])

        self.assertIsNone(Input(message="Anything?").prompt(session))

    def test_help_rune_rerenders_with_help(self) -> None:
        session, _terminal, output = make_session(lines=["?", "Mary"])
        prompt = Input(message="Name:", help="Your given name")

        self.assertEqual(prompt.prompt(session), "Mary")
        self.assertIn("ⓘ Your given name\n? Name: ", plain_output(output))

    def test_help_rune_without_help_is_plain_answer(self) -> None:
        session, _terminal, _output = make_session(lines=["?"])

        self.assertEqual(Input(message="Symbol:").prompt(session), "?")

    def test_cleanup_shows_answer(self) -> None:
        session, _terminal, output = make_session()

        Input(message="Month:").cleanup(session, "October")

        self.assertEqual(plain_output(output), "? Month: October\n")

    def test_interrupt_during_read_restores_terminal(self) -> None:
        session, terminal, _output = make_session(lines=[InterruptError()])

        with self.assertRaises(InterruptError):
            Input(message="Name:").prompt(session)

        self.assertEqual(terminal.restore_count, 1)


class SelectPromptTests(unittest.TestCase):
    def test_setters_chain_and_paginate_uses_page_size(self) -> None:
        prompt = Select(message="Pick:").set_page_size(2).set_vim_mode(True).set_filter_message(" x")
        for label in ("a", "b", "c", "d"):
            prompt.add_string_option(label)

        page = prompt.paginate(list(prompt.options), selected_index=3)

        self.assertEqual([option.display for option in page.entries], ["c", "d"])
        self.assertEqual(page.cursor, 1)
        self.assertTrue(prompt.vim_mode)
        self.assertEqual(prompt.display_filter_message(), " x")

    def test_list_prompt_bases_cannot_be_used_directly(self) -> None:
        with self.assertRaises(TypeError):
            SelectionPrompt(message="Pick:")
        with self.assertRaises(TypeError):
            SelectionMachine(OptionSet())


if __name__ == "__main__":
    unittest.main()
