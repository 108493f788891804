"""Mediator: los usuarios se comunican solo a través de la sala de chat."""

from __future__ import annotations

from core.domain.models import PatternCategory, PatternInfo
from core.interfaces.demo import Emit
from patterns._base import DemoBase


class ChatRoom:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def join(self, user: User) -> None:
        self._users[user.name] = user
        user.room = self

    def send(self, sender: User, message: str, to: str | None = None) -> int:
        """Entrega el mensaje y devuelve cuántos usuarios lo recibieron."""

        if to is not None:
            recipients = [self._users[to]] if to in self._users else []
        else:
            recipients = [u for name, u in self._users.items() if name != sender.name]
        for user in recipients:
            user.receive(sender.name, message)
        return len(recipients)


class User:
    def __init__(self, name: str, emit: Emit) -> None:
        self.name = name
        self.room: ChatRoom | None = None
        self.inbox: list[str] = []
        self._emit = emit

    def send(self, message: str, to: str | None = None) -> int:
        if self.room is None:
            raise RuntimeError(f"{self.name} has not joined a room")
        return self.room.send(self, message, to)

    def receive(self, sender: str, message: str) -> None:
        self.inbox.append(message)
        self._emit(f"{self.name} <- {sender}: {message}")


class MediatorDemo(DemoBase):
    info = PatternInfo(
        slug="mediator",
        name="Mediator",
        category=PatternCategory.BEHAVIORAL,
        intent="Define an object that encapsulates how a set of objects interact, promoting loose coupling.",
        intent_es="Define un objeto que encapsula cómo interactúan otros, favoreciendo el bajo acoplamiento.",
    )

    def run(self, emit: Emit) -> None:
        room = ChatRoom()
        alice, bob, carol = User("Alice", emit), User("Bob", emit), User("Carol", emit)
        for user in (alice, bob, carol):
            room.join(user)

        alice.send("Hi everyone!")
        bob.send("Hey Alice, lunch at noon?", to="Alice")
        delivered = carol.send("Anyone there?", to="Dave")
        emit(f"Messages delivered to Dave: {delivered}")
