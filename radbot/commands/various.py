"""Miscellaneous commands ("Various" module).

Handles: social, settings (owners only).
"""

from __future__ import annotations

from typing import List

from ..embeds import MessageSink, build_document
from .base import BaseCommandHandler
from .models import Command, InvocationContext, Module


class VariousCommandHandler(BaseCommandHandler):
    """Small commands that do not belong to any feature module."""

    def get_modules(self) -> List[Module]:
        various = Module(
            name="Various",
            commands=[
                Command(
                    name="social",
                    summary="Prints developer's social links.",
                    handler=self.handle_social,
                ),
            ],
        )
        owner = Module(
            name="Owner",
            parent=various,
            preconditions=[self.ctx.require_owner()],
            commands=[
                Command(
                    name="settings",
                    summary="Prints the bot's reply settings.",
                    extra_aliases=["config"],
                    handler=self.handle_settings,
                ),
            ],
        )
        return [various, owner]

    async def handle_social(
        self, context: InvocationContext, sink: MessageSink, args: str = ""
    ) -> None:
        """Reply with the configured social links, one field per link."""
        links = self.ctx.config.social_links
        document = build_document(
            "Social links",
            [(f"{name}:", url, True) for name, url in links.items()],
            color=self.ctx.config.embed_color,
        )
        await sink.send_document(document)

    async def handle_settings(
        self, context: InvocationContext, sink: MessageSink, args: str = ""
    ) -> None:
        """Reply with the non-secret settings that shape bot replies."""
        config = self.ctx.config
        document = build_document(
            "Settings",
            [
                ("Prefix:", f"`{config.prefix}`"),
                ("Bullet:", config.bullet_symbol),
                ("Color:", f"#{config.embed_color:06X}"),
                ("Owners:", str(len(config.owner_ids))),
            ],
            color=config.embed_color,
        )
        await sink.send_document(document)
