import asyncio
from typing import Dict, Callable, Any, List, Optional
from collections import OrderedDict
import logging
import json
import requests
import requests.exceptions
import yaml
import copy

from .event import BridgeMessage, CommandEvent

module_logger = logging.getLogger('libleader.core')

class CommandResult(object):
    def __init__(self, output: str, cmd: str = None, is_help: bool = False):
        self.output = output
        self.cmd = cmd
        self.is_help = is_help

    def __repr__(self):
        return yaml.dump(vars(self), default_flow_style=False)

class Command(object):
    def __init__(self, func: Callable[[Any], Any] = None, description: str = None):
        self.func = func
        self.description = description

    def __repr__(self):
        return f"Command(func={getattr(self.func, '__name__', None)}, description={self.description!r})"

class CommandContext(object):
    """
    what a command callback gets to work with: the triggering event and
    the bot it can send replies through
    """
    def __init__(self, event: CommandEvent, cord: 'LibLeader'):
        self.event = event
        self.cord = cord

    def privmsg(self, destination: str, text: str):
        self.cord.privmsg(destination, text)

    def __repr__(self):
        return f"CommandContext(event={self.event!r})"

class CommandHandler:
    def __init__(self, name: str):
        self.name = name
        self.cmd_map: Dict[str, Command] = OrderedDict()

    def register(self, prog: str, description: str = None):
        """
        registers a function as a given command name, with a optional description
        """
        def func_wrapper(func):
            descript = description
            if not descript and func.__doc__:
                descript = func.__doc__.strip()
            if prog in self.cmd_map:
                module_logger.warning(f"command '{prog}' in {self.name} registered again, replacing it")
            module_logger.debug(f"register {self.name}.{prog}: {descript}")
            self.cmd_map[prog] = Command(func=func, description=descript)
            return func
        return func_wrapper

    def list(self) -> Dict[str, Command]:
        """
        shallow copy of all registered commands
        """
        return copy.copy(self.cmd_map)

class LibLeader:
    def __init__(self, username: str, prefix: str = '!', token: str = None, host: str = 'localhost', port: int = 4242,
                 protocol: str = 'http', gateway: str = None, commands: List[str] = None,
                 poll_interval: float = 0.1, max_poll_interval: float = 20, wiki: dict = None):
        from libleader.loader import ModLoader

        if not username:
            raise ValueError("username required")

        self.prefix = prefix
        self.username = username
        self.host = host
        self.port = port
        self.protocol = protocol
        self.gateway = gateway
        self.commands = commands
        self.poll_interval = poll_interval
        self.max_poll_interval = max_poll_interval

        self.loader = ModLoader(self)

        self.cmd_handlers: Dict[str, CommandHandler] = OrderedDict()
        self.session = requests.Session()
        if token:
            self.session.headers.update({'Authorization': f"Bearer {token}"})

        self.wiki = None
        if wiki:
            from libleader.gitwiki import Gitwiki
            self.wiki = Gitwiki(**wiki)

        self.q: Optional[asyncio.Queue] = None

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    def create_handler(self, name: str) -> CommandHandler:
        handler: CommandHandler = CommandHandler(name=name)
        self.cmd_handlers[name] = handler
        return handler

    def find(self, prog: str) -> Optional[Command]:
        for handler_name, cmd_handler in self.cmd_handlers.items():
            if prog in cmd_handler.cmd_map:
                return cmd_handler.cmd_map[prog]
        return None

    def send(self, message: BridgeMessage):
        if not message.username:
            message.username = self.username
        if not message.gateway:
            message.gateway = self.gateway
        dict_dump = message.to_dict()
        module_logger.debug(f"message as json: {json.dumps(dict_dump)}")
        url = f"{self.base_url}/api/message"
        response = self.session.post(url, json=dict_dump)
        response.raise_for_status()

    def privmsg(self, destination: str, text: str):
        self.send(BridgeMessage(text=text, channel=destination, username=self.username, gateway=self.gateway))

    def call(self, event: CommandEvent, context: CommandContext = None) -> CommandResult:
        tokens = event.message.split()
        if not tokens:
            return CommandResult(output='', cmd=None)
        prog = tokens[0]
        cmd = self.find(prog)
        if not cmd:
            module_logger.error(f"command '{prog}' not found")
            return CommandResult(output=f"no function {prog} found", cmd=None)

        module_logger.debug(f"calling: {prog} event: {event}")
        try:
            ret = cmd.func(context or CommandContext(event, self))
        except Exception as ex:
            module_logger.exception(f"exception executing {prog}")
            return CommandResult(output=f"Error executing {prog}: {ex}", cmd=prog)

        if isinstance(ret, CommandResult):
            ret.cmd = prog
            return ret
        return CommandResult(output=ret or '', cmd=prog)

    def reply(self, destination: str, result: CommandResult):
        output = result.output
        if not output:
            return
        module_logger.debug(f"return value: {output}")
        if '\n' in output:
            if self.wiki:
                url = self.wiki.upload(f"command/{result.cmd}", output, is_help=result.is_help)
                self.privmsg(destination, url)
            else:
                for line in output.splitlines():
                    if line.strip():
                        self.privmsg(destination, line)
        else:
            self.privmsg(destination, output)

    def handle(self, message: BridgeMessage) -> Optional[CommandResult]:
        """
        dispatches a bridge message if it is a command for us
        """
        if message.username == self.username:
            return None
        if not message.text.startswith(self.prefix):
            return None
        module_logger.debug(f"command: '{message.text}' by {message.username}")
        event = CommandEvent.from_message(message, prefix=self.prefix)
        result = self.call(event)
        self.reply(event.destination, result)
        return result

    def poll(self) -> List[BridgeMessage]:
        url = f"{self.base_url}/api/messages"
        response = self.session.get(url)
        response.raise_for_status()
        if not response.content:
            return []
        msg_list = response.json() or []
        if not isinstance(msg_list, list):
            raise ValueError(f"expected a list of messages, got {type(msg_list).__name__}")
        return [BridgeMessage.from_dict(message_dict) for message_dict in msg_list]

    def next_delay(self, delay: float, failed: bool) -> float:
        if not failed:
            return self.poll_interval
        return min(delay * 2, self.max_poll_interval)

    async def consume_message(self):
        while True:
            message: BridgeMessage = await self.q.get()
            module_logger.debug(message)
            try:
                self.handle(message)
            except requests.exceptions.RequestException:
                module_logger.exception("failed to send reply")
            except Exception:
                module_logger.exception("unknown error handling message")
            finally:
                self.q.task_done()

    async def produce_message(self):
        delay = self.poll_interval
        while True:
            failed = False
            try:
                for message in self.poll():
                    await self.q.put(message)
            except requests.exceptions.ConnectionError:
                module_logger.exception("api endpoint not running")
                failed = True
            except requests.exceptions.RequestException:
                module_logger.exception("polling messages failed")
            except Exception:
                module_logger.exception("unknown error")
            delay = self.next_delay(delay, failed)
            await asyncio.sleep(delay)

    async def run(self):
        self.q = asyncio.Queue()
        await asyncio.gather(self.produce_message(), self.consume_message())

    def start(self):
        module_logger.info("starting loop")
        self.loader.load_all(self.commands)
        asyncio.run(self.run())
