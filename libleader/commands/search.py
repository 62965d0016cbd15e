import logging

from libleader.libleader import LibLeader, CommandHandler, CommandContext
from libleader.urls import lmgtfy_url, urban_dictionary_url

module_logger = logging.getLogger('libleader.commands.search')

def _query(context: CommandContext) -> str:
    # first token is the command name
    args = context.event.message.split()
    return " ".join(args[1:])

def init(cord: LibLeader):
    search: CommandHandler = cord.create_handler('search')

    @search.register("lmgtfy", "returns a 'let me google that for you' search url for the given query")
    def lmgtfy(context: CommandContext):
        event = context.event
        source = event.args[0] if event.args else None
        url = lmgtfy_url(_query(context))
        module_logger.debug(f"lmgtfy for {event.nick} -> {source}: {url}")
        context.privmsg(source, f"{event.nick}: Let me google that for you - {url}")

    @search.register("urban", "returns an urban dictionary definition url for the given term")
    def urban(context: CommandContext):
        event = context.event
        source = event.args[0] if event.args else None
        url = urban_dictionary_url(_query(context))
        context.privmsg(source, f"{event.nick}: Urban Dictionary says - {url}")
