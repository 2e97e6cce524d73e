"""
Faults module behavioral tests (codes, replacement, triggering, rendering).

Scope
- Validate FaultCode normalization and getdoc() lookups through __main__ hooks.
- Validate __replace__ merging and trigger() in shell and non-shell modes.
- Validate rich rendering of errors and warnings.

Conventions
- Test method names follow CamelCase per project convention.
- __main__ hooks are patched with create=True and restored after each test.
"""

from __future__ import annotations

import __main__
import io
import unittest
from unittest import TestCase, mock

from rich.console import Console

from trivial_argument_parser import faults
from trivial_argument_parser.faults import (
    FaultCode,
    ArgumentException,
    UnknownArgumentError,
    DanglingValueError,
    DelegatedHandlerWarning,
    trigger,
    getdoc,
)


class TestFaultCode(TestCase):
    """Stable codes and host remapping."""

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.UNKNOWN_ARGUMENT.normalize(), "11112")

    def testNormalizeHonoursHostCodes(self):
        with mock.patch.object(__main__, "__codes__", {FaultCode.UNKNOWN_ARGUMENT: "E-UNK"}, create=True):
            self.assertEqual(FaultCode.UNKNOWN_ARGUMENT.normalize(), "E-UNK")
            self.assertEqual(FaultCode.DANGLING_VALUE.normalize(), "11121")

    def testGetdoc(self):
        self.assertIsNone(getdoc(FaultCode.DANGLING_VALUE))
        with mock.patch.object(__main__, "__docs__", {FaultCode.DANGLING_VALUE: "one bare value"}, create=True):
            self.assertEqual(getdoc(FaultCode.DANGLING_VALUE), "one bare value")

    def testGetdocRequiresCode(self):
        with self.assertRaises(TypeError):
            getdoc(11121)


class TestFaultObjects(TestCase):
    """Message, options and replacement."""

    def testMessageAndOptions(self):
        fault = DanglingValueError("dangling", index=2)
        self.assertEqual(str(fault), "dangling")
        self.assertEqual(fault.message, "dangling")
        self.assertEqual(fault.options["index"], 2)

    def testOptionsAreReadOnly(self):
        fault = DanglingValueError("dangling", index=2)
        with self.assertRaises(TypeError):
            fault.options["index"] = 3

    def testReplaceMergesOptions(self):
        fault = DanglingValueError("dangling", index=2)
        replaced = fault.__replace__(index=3, hint="remove it")
        self.assertIsInstance(replaced, DanglingValueError)
        self.assertEqual(replaced.message, "dangling")
        self.assertEqual(dict(replaced.options), {"index": 3, "hint": "remove it"})
        self.assertEqual(fault.options["index"], 2)

    def testReplaceMessage(self):
        self.assertEqual(DanglingValueError("a").__replace__(message="b").message, "b")

    def testMessageMustBeString(self):
        with self.assertRaises(AssertionError):
            ArgumentException(42)


class TestTrigger(TestCase):
    """trigger() contract in both modes."""

    def setUp(self):
        self.buffer = io.StringIO()
        self.patch = mock.patch.object(faults, "console", Console(file=self.buffer, width=200, color_system=None))
        self.patch.start()
        self.addCleanup(self.patch.stop)

    def testTriggerRequiresProtocol(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("nope"))

    def testTriggerRaisesOutsideShell(self):
        with self.assertRaises(UnknownArgumentError) as context:
            trigger(UnknownArgumentError("unknown"), shell=False, input="--x")
        self.assertEqual(context.exception.options["input"], "--x")

    def testTriggerExitsInShell(self):
        with self.assertRaises(SystemExit) as context:
            trigger(
                UnknownArgumentError("unknown argument '--x' at first position"),
                shell=True,
                colorful=False,
                prog="tool",
                code=FaultCode.UNKNOWN_ARGUMENT,
                title="unknown argument",
                hint="did you mean '--y'?",
            )
        self.assertEqual(context.exception.code, 1)
        output = self.buffer.getvalue()
        self.assertIn("[ tool — 11112 | Unknown Argument ]", output)
        self.assertIn("→ did you mean '--y'?", output)

    def testTriggerWarningOutsideShell(self):
        with self.assertWarns(DelegatedHandlerWarning):
            trigger(DelegatedHandlerWarning("careful"), shell=False)

    def testTriggerWarningInShell(self):
        trigger(DelegatedHandlerWarning("careful"), shell=True, colorful=False, prog="tool")
        self.assertIn("careful", self.buffer.getvalue())

    def testProgFromMain(self):
        with mock.patch.object(__main__, "__prog__", "hosted", create=True):
            with self.assertRaises(SystemExit):
                trigger(DanglingValueError("dangling"), shell=True, colorful=False)
        self.assertIn("hosted", self.buffer.getvalue())


if __name__ == "__main__":
    unittest.main()
