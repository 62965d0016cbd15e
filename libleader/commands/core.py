from libleader.libleader import LibLeader, CommandContext, CommandResult

def init(cord: LibLeader):
    core = cord.create_handler('core')

    @core.register("list")
    def list_function(context: CommandContext):
        """
        lists all registered commands.
        """
        lines = []
        for group, cmd_group in cord.cmd_handlers.items():
            lines.append(group.upper())
            for key, cmd in cmd_group.list().items():
                desc = ""
                if cmd.description:
                    desc = ": " + cmd.description
                lines.append(f"{cord.prefix}{key}{desc}")
        return CommandResult(output="\n".join(lines), is_help=True)

    @core.register("help")
    def help_function(context: CommandContext):
        """
        shows the help text of a command.
        """
        args = context.event.message.split()[1:]
        if not args:
            return list_function(context)
        command = args[0]
        if command.startswith(cord.prefix):
            command = command[len(cord.prefix):]
        cmd = cord.find(command)
        if not cmd:
            return f"no function {command} found"
        return CommandResult(output=f"{command}: {cmd.description or 'no description'}", is_help=True)
