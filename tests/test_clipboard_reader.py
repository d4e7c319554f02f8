"""Tests for the pyperclip-backed clipboard reader."""

import unittest
from unittest.mock import patch

import pyperclip

from clip_solver.clipboard_reader import PyperclipReader
from clip_solver.exceptions import ClipboardAccessError


class TestPyperclipReader(unittest.TestCase):

    @patch("clip_solver.clipboard_reader.pyperclip.paste", return_value="copied text")
    def test_read(self, mock_paste):
        self.assertEqual(PyperclipReader().read(), "copied text")
        mock_paste.assert_called_once_with()

    @patch("clip_solver.clipboard_reader.pyperclip.paste", return_value=None)
    def test_none_becomes_empty(self, mock_paste):
        self.assertEqual(PyperclipReader().read(), "")

    @patch("clip_solver.clipboard_reader.pyperclip.paste",
           side_effect=pyperclip.PyperclipException("could not find a copy/paste mechanism"))
    def test_backend_failure(self, mock_paste):
        with self.assertRaises(ClipboardAccessError) as ctx:
            PyperclipReader().read()
        self.assertIsInstance(ctx.exception.original_error, pyperclip.PyperclipException)
        self.assertIn("copy/paste mechanism", str(ctx.exception))

    @patch("clip_solver.clipboard_reader.pyperclip.paste",
           side_effect=UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"))
    def test_undecodable_clipboard(self, mock_paste):
        with self.assertRaises(ClipboardAccessError) as ctx:
            PyperclipReader().read()
        self.assertIsInstance(ctx.exception.original_error, UnicodeDecodeError)


if __name__ == "__main__":
    unittest.main()
