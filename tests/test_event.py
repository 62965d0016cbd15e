import unittest

from libleader import BridgeMessage, CommandEvent


class CommandEventTests(unittest.TestCase):
    def test_defaults(self):
        event = CommandEvent()
        self.assertEqual(event.message, '')
        self.assertEqual(event.args, ())
        self.assertEqual(event.nick, '')
        self.assertIsNone(event.destination)

    def test_none_message_becomes_empty(self):
        self.assertEqual(CommandEvent(message=None).message, '')

    def test_destination_is_first_arg(self):
        event = CommandEvent(message='lmgtfy x', args=['#general', 'extra'], nick='alice')
        self.assertEqual(event.destination, '#general')
        self.assertEqual(event.args, ('#general', 'extra'))

    def test_from_channel_message(self):
        message = BridgeMessage(text='!lmgtfy x y', channel='#general', username='alice')
        event = CommandEvent.from_message(message, prefix='!')
        self.assertEqual(event.message, 'lmgtfy x y')
        self.assertEqual(event.args, ('#general',))
        self.assertEqual(event.nick, 'alice')

    def test_private_message_replies_to_sender(self):
        message = BridgeMessage(text='!lmgtfy x', username='alice')
        self.assertEqual(CommandEvent.from_message(message, prefix='!').destination, 'alice')

    def test_multi_character_prefix(self):
        message = BridgeMessage(text='>>lmgtfy x', channel='#c', username='a')
        self.assertEqual(CommandEvent.from_message(message, prefix='>>').message, 'lmgtfy x')


class BridgeMessageTests(unittest.TestCase):
    def test_from_dict_ignores_unknown_keys(self):
        message = BridgeMessage.from_dict({'text': 'hi', 'username': 'bob', 'Extra': {'file': []}, 'bogus': 1})
        self.assertEqual(message.text, 'hi')
        self.assertEqual(message.extra, {'file': []})
        self.assertFalse(hasattr(message, 'bogus'))

    def test_to_dict_drops_empty_fields(self):
        message = BridgeMessage(text='hi', channel='#c', username='', gateway='main')
        self.assertEqual(message.to_dict(), {'text': 'hi', 'channel': '#c', 'gateway': 'main'})


if __name__ == "__main__":
    unittest.main()
