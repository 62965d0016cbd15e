from .event import BridgeMessage, CommandEvent
from .libleader import LibLeader, CommandHandler, CommandContext, CommandResult, Command
