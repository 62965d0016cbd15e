from typing import Iterable, Optional
import logging
import yaml

module_logger = logging.getLogger('libleader.event')

class BridgeMessage(object):

# {'text': '!lmgtfy python decorators', 'channel': '#general', 'username': 'alice', 'userid': '', 'avatar': '',
# 'account': 'irc.freenode', 'event': '', 'protocol': 'irc', 'gateway': 'main', 'parent_id': '',
# 'timestamp': '2026-10-19T13:22:08.759413856+02:00', 'id': '', 'Extra': None}
    FIELDS = ('text', 'channel', 'username', 'userid', 'avatar', 'account', 'event',
              'protocol', 'gateway', 'parent_id', 'timestamp', 'id', 'extra')

    def __init__(self, text: str = '', channel: str = None, username: str = None, userid: str = None,
                 avatar: str = None, account: str = None, event: str = None, protocol: str = None,
                 gateway: str = None, parent_id: str = None, timestamp: str = None, id: str = None,
                 extra: dict = None):
        self.text = text or ''
        self.channel = channel
        self.username = username
        self.userid = userid
        self.avatar = avatar
        self.account = account
        self.event = event
        self.protocol = protocol
        self.gateway = gateway
        self.parent_id = parent_id
        self.timestamp = timestamp
        self.id = id
        self.extra = extra

    @classmethod
    def from_dict(cls, data: dict) -> 'BridgeMessage':
        """
        builds a message from an api payload, unknown keys are dropped
        """
        known = {}
        for key, value in data.items():
            # the api sends Extra capitalized
            name = key.lower()
            if name in cls.FIELDS:
                known[name] = value
            else:
                module_logger.debug(f"ignoring unknown message field '{key}'")
        return cls(**known)

    def to_dict(self) -> dict:
        return {key: getattr(self, key) for key in self.FIELDS if getattr(self, key)}

    def __repr__(self):
        return yaml.dump(self.to_dict(), default_flow_style=True).rstrip()


class CommandEvent(object):
    """
    one triggering message, as seen by a command callback

    `message` is the text without the command prefix, `args` holds the
    reply destination as its first element and `nick` is the sender.
    """
    def __init__(self, message: str = '', args: Iterable[str] = None, nick: str = ''):
        self.message = message or ''
        self.args = tuple(args) if args else ()
        self.nick = nick or ''

    @property
    def destination(self) -> Optional[str]:
        return self.args[0] if self.args else None

    @classmethod
    def from_message(cls, message: BridgeMessage, prefix: str = '') -> 'CommandEvent':
        text = message.text
        if prefix and text.startswith(prefix):
            text = text[len(prefix):]
        # private messages carry no channel, the reply goes back to the sender
        source = message.channel or message.username
        return cls(message=text, args=[source] if source else None, nick=message.username)

    def __repr__(self):
        return yaml.dump({'message': self.message, 'args': list(self.args), 'nick': self.nick},
                         default_flow_style=True).rstrip()
