from __future__ import annotations

import threading
import time
import unittest

from greetings.application.dispatch import BirthdayService, dispatch_all, select_handler
from greetings.domain.chat import ChatHandler
from greetings.domain.email import EmailHandler
from greetings.domain.entities import build_envelope
from greetings.domain.values import EmailAddress
from greetings.errors import (
    NoApplicableChannel,
    SelectionFailure,
    SourceUnavailable,
    TransportFailure,
)
from tests.support import BrokenSource, StaticSource, bob, jane, make_employee


def send_email_ok(*, to_email: str, subject: str, body: str) -> None:
    return None


def send_chat_ok(*, to_handle: str, message: str) -> None:
    return None


def send_chat_unreachable(*, to_handle: str, message: str) -> None:
    raise TransportFailure("unreachable")


class BrokenCanHandle(ChatHandler):
    def __init__(self, send_chat, *, broken_for: str = "any") -> None:  # type: ignore[no-untyped-def]
        super().__init__(send_chat)
        self.broken_for = broken_for

    def can_handle(self, envelope):  # type: ignore[no-untyped-def]
        if self.broken_for in ("any", envelope.to.channel):
            raise AttributeError("boom")
        return super().can_handle(envelope)


class DispatchAllTests(unittest.TestCase):
    def test_both_channels_succeed_in_roster_order(self) -> None:
        source = StaticSource([jane(), bob()])
        handlers = [EmailHandler(send_email_ok), ChatHandler(send_chat_ok)]

        result = dispatch_all(source, handlers)

        self.assertEqual(len(result), 2)
        self.assertTrue(result.all_succeeded)
        self.assertEqual([item.employee for item in result], [jane(), bob()])
        self.assertEqual([item.channel for item in result], ["chat", "email"])
        self.assertEqual(source.calls, 1)

    def test_chat_failure_does_not_affect_email_delivery(self) -> None:
        sent_emails: list[str] = []

        def send_email(*, to_email: str, subject: str, body: str) -> None:
            sent_emails.append(to_email)

        handlers = [EmailHandler(send_email), ChatHandler(send_chat_unreachable)]

        result = dispatch_all(StaticSource([jane(), bob()]), handlers)

        self.assertFalse(result[0].success)
        self.assertIsInstance(result[0].error, TransportFailure)
        self.assertIn("unreachable", str(result[0].error))
        self.assertTrue(result[1].success)
        self.assertEqual(sent_emails, ["bob@x.com"])
        self.assertFalse(result.all_succeeded)
        self.assertEqual(result.failures, [result[0]])

    def test_missing_handler_records_no_applicable_channel(self) -> None:
        result = dispatch_all(StaticSource([jane()]), [EmailHandler(send_email_ok)])

        self.assertEqual(len(result), 1)
        self.assertIsNone(result[0].channel)
        self.assertIsInstance(result[0].error, NoApplicableChannel)

    def test_missing_handler_leaves_other_outcomes_untouched(self) -> None:
        roster = [bob(), jane(), make_employee("Ann", "Lee", address=EmailAddress.create("a@x"))]

        result = dispatch_all(StaticSource(roster), [EmailHandler(send_email_ok)])

        self.assertEqual([item.success for item in result], [True, False, True])
        self.assertEqual([item.index for item in result], [0, 1, 2])

    def test_unexpected_handler_exception_is_recorded_per_item(self) -> None:
        class ExplodingHandler(EmailHandler):
            def send(self, envelope):  # type: ignore[no-untyped-def]
                raise KeyError("boom")

        result = dispatch_all(StaticSource([bob(), jane()]), [
            ExplodingHandler(send_email_ok),
            ChatHandler(send_chat_ok),
        ])

        self.assertIsInstance(result[0].error, TransportFailure)
        self.assertTrue(result[1].success)

    def test_source_failure_aborts_pass(self) -> None:
        source = BrokenSource(OSError("database down"))
        sent: list[str] = []

        def send_email(*, to_email: str, subject: str, body: str) -> None:
            sent.append(to_email)

        with self.assertRaises(SourceUnavailable) as exc:
            dispatch_all(source, [EmailHandler(send_email)])

        self.assertIsInstance(exc.exception.cause, OSError)
        self.assertIsInstance(exc.exception.__cause__, OSError)
        self.assertEqual(source.calls, 1)
        self.assertEqual(sent, [])

    def test_empty_roster_returns_empty_result(self) -> None:
        result = dispatch_all(StaticSource([]), [EmailHandler(send_email_ok)])

        self.assertEqual(len(result), 0)
        self.assertTrue(result.all_succeeded)

    def test_empty_handler_list_records_no_applicable_channel_per_item(self) -> None:
        with self.assertLogs("greetings.application.dispatch", level="WARNING") as logs:
            result = dispatch_all(StaticSource([bob(), jane()]), [])

        self.assertEqual(len(result), 2)
        self.assertEqual([item.channel for item in result], [None, None])
        for item in result:
            self.assertIsInstance(item.error, NoApplicableChannel)
        self.assertIn("EMPTY CONFIG", logs.output[0])

    def test_failing_can_handle_is_recorded_per_item(self) -> None:
        sent: list[str] = []

        def send_email(*, to_email: str, subject: str, body: str) -> None:
            sent.append(to_email)

        for max_workers in (1, 3):
            sent.clear()
            result = dispatch_all(
                StaticSource([bob(), jane(), bob()]),
                [EmailHandler(send_email), BrokenCanHandle(send_chat_ok)],
                max_workers=max_workers,
            )

            self.assertEqual(len(result), 3)
            for item in result:
                self.assertIsInstance(item.error, SelectionFailure)
                self.assertIsNone(item.channel)
            self.assertIsInstance(result[0].error.cause, AttributeError)
            self.assertEqual(sent, [])

    def test_failing_can_handle_leaves_other_employees_untouched(self) -> None:
        result = dispatch_all(
            StaticSource([bob(), jane()]),
            [ChatHandler(send_chat_ok), BrokenCanHandle(send_email_ok, broken_for="email")],
        )

        self.assertIsInstance(result[0].error, SelectionFailure)
        self.assertTrue(result[1].success)

    def test_requires_positive_workers(self) -> None:
        with self.assertRaises(ValueError):
            dispatch_all(StaticSource([bob()]), [EmailHandler(send_email_ok)], max_workers=0)


class ParallelDispatchTests(unittest.TestCase):
    def test_parallel_pass_keeps_roster_order(self) -> None:
        roster = [
            make_employee(f"E{index}", "X", address=EmailAddress.create(f"e{index}@x"))
            for index in range(8)
        ]
        delivered: list[str] = []
        lock = threading.Lock()

        def send_email(*, to_email: str, subject: str, body: str) -> None:
            # Earlier items finish last.
            time.sleep(0.002 * (8 - int(to_email[1])))
            with lock:
                delivered.append(to_email)

        result = dispatch_all(StaticSource(roster), [EmailHandler(send_email)], max_workers=4)

        self.assertEqual([item.employee for item in result], roster)
        self.assertEqual([item.index for item in result], list(range(8)))
        self.assertEqual(sorted(delivered), sorted(f"e{index}@x" for index in range(8)))

    def test_parallel_failure_does_not_cancel_siblings(self) -> None:
        result = dispatch_all(
            StaticSource([jane(), bob(), jane(), bob()]),
            [EmailHandler(send_email_ok), ChatHandler(send_chat_unreachable)],
            max_workers=4,
        )

        self.assertEqual([item.success for item in result], [False, True, False, True])


class SelectHandlerTests(unittest.TestCase):
    def test_first_match_wins_and_ambiguity_is_logged(self) -> None:
        first = EmailHandler(send_email_ok)
        second = EmailHandler(send_email_ok)

        with self.assertLogs("greetings.application.dispatch", level="WARNING") as logs:
            selected = select_handler(build_envelope(bob()), [first, second])

        self.assertIs(selected, first)
        self.assertIn("AMBIGUOUS CHANNEL", logs.output[0])

    def test_returns_none_without_match(self) -> None:
        self.assertIsNone(select_handler(build_envelope(jane()), [EmailHandler(send_email_ok)]))


class BirthdayServiceTests(unittest.TestCase):
    def test_send_greetings_runs_one_pass(self) -> None:
        source = StaticSource([jane(), bob()])
        service = BirthdayService(source, [EmailHandler(send_email_ok), ChatHandler(send_chat_ok)])

        result = service.send_greetings()

        self.assertTrue(result.all_succeeded)
        self.assertEqual(source.calls, 1)

    def test_without_handlers_every_employee_has_no_channel(self) -> None:
        service = BirthdayService(StaticSource([jane(), bob()]), [])

        result = service.send_greetings()

        self.assertEqual(len(result), 2)
        self.assertTrue(all(isinstance(item.error, NoApplicableChannel) for item in result))

    def test_duplicated_channels_are_flagged_at_construction(self) -> None:
        with self.assertLogs("greetings.application.dispatch", level="WARNING") as logs:
            BirthdayService(
                StaticSource([]),
                [EmailHandler(send_email_ok), EmailHandler(send_email_ok)],
            )

        self.assertIn("duplicated_channels=email", logs.output[0])


if __name__ == "__main__":
    unittest.main()
