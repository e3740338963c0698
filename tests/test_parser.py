import json
import unittest

from raycli.errors import NoCommandError, ResponseFormatError
from raycli.parser import extract_command, first_command_line


def _body(content):
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]})


class TestExtractCommand(unittest.TestCase):
    """Test cases for pulling the command out of a completion response."""

    def test_fenced_block(self):
        """The fence line is skipped."""
        self.assertEqual(extract_command(_body("```bash\nls -la\n```")), "ls -la")

    def test_first_line_wins(self):
        """Later lines are never considered."""
        self.assertEqual(
            extract_command(_body("\n\nrm -rf /tmp/x\nsome trailing comment\n")),
            "rm -rf /tmp/x",
        )

    def test_plain_fence_and_whitespace(self):
        self.assertEqual(extract_command(_body("```\n   du -sh *   \r\n```")), "du -sh *")

    def test_only_first_choice_is_used(self):
        body = json.dumps({
            "id": "chatcmpl-1",
            "choices": [
                {"index": 0, "message": {"content": "pwd"}, "finish_reason": "stop"},
                {"index": 1, "message": {"content": "whoami"}},
            ],
            "usage": {"total_tokens": 12},
        })
        self.assertEqual(extract_command(body), "pwd")

    def test_no_choices(self):
        with self.assertRaises(ResponseFormatError) as ctx:
            extract_command('{"choices": []}')
        self.assertIn("no choices", str(ctx.exception))

    def test_missing_choices(self):
        with self.assertRaises(ResponseFormatError):
            extract_command('{"error": {"message": "bad"}}')

    def test_choices_not_a_list(self):
        with self.assertRaises(ResponseFormatError):
            extract_command('{"choices": "ls"}')

    def test_invalid_json(self):
        with self.assertRaises(ResponseFormatError):
            extract_command("<html>Bad Gateway</html>")

    def test_missing_message(self):
        with self.assertRaises(ResponseFormatError) as ctx:
            extract_command('{"choices": [{"index": 0}]}')
        self.assertIn("failed to extract content", str(ctx.exception))

    def test_null_content(self):
        with self.assertRaises(ResponseFormatError):
            extract_command('{"choices": [{"message": {"content": null}}]}')

    def test_no_command_in_content(self):
        with self.assertRaises(NoCommandError) as ctx:
            extract_command(_body("```bash\n\n   \n```"))
        self.assertIn("no valid command found", str(ctx.exception))

    def test_no_command_error_is_distinct(self):
        self.assertFalse(issubclass(NoCommandError, ResponseFormatError))


class TestFirstCommandLine(unittest.TestCase):

    def test_empty_content(self):
        with self.assertRaises(NoCommandError):
            first_command_line("")

    def test_fence_with_language(self):
        self.assertEqual(first_command_line("```sh\necho hi\n"), "echo hi")


if __name__ == "__main__":
    unittest.main()
