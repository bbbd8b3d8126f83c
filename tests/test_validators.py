from __future__ import annotations

import unittest

from termsurvey.errors import ValidationError
from termsurvey.options import Option
from termsurvey.transformers import compose_transformers, title, to_lower, transform_string
from termsurvey.validators import compose_validators, max_length, min_length, required, run_validator


class RequiredTests(unittest.TestCase):
    def test_rejects_empty_answers(self) -> None:
        for answer in (None, "", [], {}):
            with self.subTest(answer=answer):
                with self.assertRaisesRegex(ValidationError, "Value is required"):
                    required(answer)

    def test_accepts_present_answers(self) -> None:
        for answer in ("x", [Option("a", "a")], Option("", ""), 0, False):
            with self.subTest(answer=answer):
                self.assertIsNone(required(answer))


class LengthTests(unittest.TestCase):
    def test_max_length_counts_characters_and_selections(self) -> None:
        validate = max_length(3)

        self.assertIsNone(validate("abc"))
        self.assertIsNone(validate(["a", "b"]))
        with self.assertRaisesRegex(ValidationError, "value is too long. Max length is 3"):
            validate("abcd")

    def test_max_length_counts_code_points(self) -> None:
        self.assertIsNone(max_length(2)("ün"))

    def test_min_length(self) -> None:
        validate = min_length(2)

        self.assertIsNone(validate("ab"))
        with self.assertRaisesRegex(ValidationError, "value is too short. Min length is 2"):
            validate(["only"])

    def test_length_on_unsized_answer_is_rejected(self) -> None:
        with self.assertRaisesRegex(ValidationError, "cannot enforce length on response of type bool"):
            max_length(1)(True)


class RunValidatorTests(unittest.TestCase):
    def test_normalizes_rejection_forms(self) -> None:
        def raises(_answer):
            raise ValidationError("raised")

        raised = run_validator(raises, "x")
        returned = run_validator(lambda _answer: ValueError("returned"), "x")
        message = run_validator(lambda _answer: "message", "x")

        self.assertEqual([str(raised), str(returned), str(message)], ["raised", "returned", "message"])
        for rejection in (raised, returned, message):
            self.assertIsInstance(rejection, ValidationError)

    def test_none_and_empty_string_accept(self) -> None:
        self.assertIsNone(run_validator(lambda _answer: None, "x"))
        self.assertIsNone(run_validator(lambda _answer: "", "x"))

    def test_other_exceptions_propagate(self) -> None:
        def broken(_answer):
            raise KeyError("boom")

        with self.assertRaises(KeyError):
            run_validator(broken, "x")

    def test_compose_reports_first_failure(self) -> None:
        validate = compose_validators(required, max_length(3), min_length(10))

        self.assertEqual(str(run_validator(validate, "")), "Value is required")
        self.assertEqual(str(run_validator(validate, "abcd")), "value is too long. Max length is 3")
        self.assertEqual(str(run_validator(validate, "ab")), "value is too short. Min length is 10")


class TransformerTests(unittest.TestCase):
    def test_to_lower_and_title(self) -> None:
        self.assertEqual(to_lower("MiXeD Case"), "mixed case")
        self.assertEqual(title("john mcCLANE"), "John McCLANE")

    def test_non_string_answers_are_left_alone(self) -> None:
        self.assertIsNone(to_lower(42))
        self.assertIsNone(transform_string(str.upper)(["a"]))

    def test_compose_feeds_results_forward(self) -> None:
        transform = compose_transformers(to_lower, title)

        self.assertEqual(transform("HELLO WORLD"), "Hello World")
        self.assertEqual(transform(7), 7)


if __name__ == "__main__":
    unittest.main()
