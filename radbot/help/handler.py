"""Help command handler for radbot.

Handles: help, help <command>.
"""

from __future__ import annotations

from typing import List

import structlog

from ..commands.base import BaseCommandHandler
from ..commands.models import Command, InvocationContext, Module, Parameter
from ..embeds import MessageSink, build_document
from .catalog import build_catalog
from .renderer import render_command
from .resolver import NotFound, resolve

logger = structlog.get_logger("radbot.help")

CATALOG_TITLE = "Available commands (for you)"


class HelpCommandHandler(BaseCommandHandler):
    """Lists available commands and shows per-command help pages."""

    def get_modules(self) -> List[Module]:
        return [
            Module(
                name="Help",
                commands=[
                    Command(
                        name="help",
                        summary="Prints help message.",
                        handler=self.handle_help,
                    ),
                    Command(
                        name="help",
                        summary="Prints help message about specified command.",
                        parameters=[
                            Parameter("command", "The command", is_remainder=True),
                        ],
                        handler=self.handle_help,
                    ),
                ],
            )
        ]

    async def handle_help(
        self, context: InvocationContext, sink: MessageSink, args: str = ""
    ) -> None:
        """Show available commands, or the help page of one command.

        Chat usage::

            !help
            !help ban

        Args:
            context: The caller; decides which commands are listed.
            sink: Where replies go.
            args: Optional command name or alias to look up.
        """
        query = args.strip()
        if query:
            await self._send_command_help(sink, query)
        else:
            await self._send_catalog(context, sink)

    async def _send_catalog(self, context: InvocationContext, sink: MessageSink) -> None:
        catalog = await build_catalog(self.ctx.registry, context, self.ctx.evaluator)
        document = build_document(
            CATALOG_TITLE,
            [(entry.name, entry.block, True) for entry in catalog],
            color=self.ctx.config.embed_color,
        )
        await sink.send_document(document)

    async def _send_command_help(self, sink: MessageSink, query: str) -> None:
        resolution = resolve(self.ctx.registry, query)
        if isinstance(resolution, NotFound):
            await sink.send_text(resolution.message)
            return

        if len(resolution.matches) > 1:
            logger.debug("help_lookup_ambiguous", query=query, matches=len(resolution.matches))
        for command in resolution.matches:
            await sink.send_document(
                render_command(
                    command,
                    resolution.query,
                    bullet=self.ctx.config.bullet_symbol,
                    color=self.ctx.config.embed_color,
                )
            )
