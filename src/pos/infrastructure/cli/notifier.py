"""Notifier that prints cashier messages to the terminal."""

from __future__ import annotations

import click

from pos.domain.gateway.notifier import NotificationKind, Notifier

_COLORS = {
    NotificationKind.INFO: "cyan",
    NotificationKind.SUCCESS: "green",
    NotificationKind.ERROR: "red",
}


class ClickNotifier(Notifier):

    def notify(self, kind: NotificationKind, title: str, message: str) -> None:
        click.secho(f"[{title}] {message}", fg=_COLORS[kind], err=kind is NotificationKind.ERROR)
