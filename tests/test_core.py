import unittest

from libleader import CommandEvent
from libleader.loader import ModLoader

from tests.helpers import make_cord, sent


class CoreCommandTests(unittest.TestCase):
    def setUp(self):
        self.cord = make_cord(prefix='!')
        loader = ModLoader(self.cord)
        loader.load('core')
        loader.load('search')

    def call(self, text):
        return self.cord.call(CommandEvent(message=text, args=['#c'], nick='alice'))

    def test_help_for_command(self):
        result = self.call('help lmgtfy')
        self.assertEqual(result.output, "lmgtfy: returns a 'let me google that for you' search url for the given query")
        self.assertTrue(result.is_help)

    def test_help_accepts_prefixed_name(self):
        self.assertTrue(self.call('help !urban').output.startswith('urban: '))

    def test_help_unknown(self):
        self.assertEqual(self.call('help nope').output, 'no function nope found')

    def test_list(self):
        lines = self.call('list').output.splitlines()
        self.assertEqual(lines[0], 'CORE')
        self.assertIn('SEARCH', lines)
        self.assertIn("!lmgtfy: returns a 'let me google that for you' search url for the given query", lines)
        self.assertIn('!help: shows the help text of a command.', lines)

    def test_help_without_argument_lists(self):
        self.assertEqual(self.call('help').output, self.call('list').output)

    def test_list_is_sent_line_by_line(self):
        result = self.call('list')
        self.cord.reply('#c', result)
        self.assertEqual([text for _, text in sent(self.cord)], [l for l in result.output.splitlines() if l])


if __name__ == "__main__":
    unittest.main()
