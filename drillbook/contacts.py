"""A bounded contact book with an interactive menu."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Iterator, Optional, TextIO

MAX_CONTACTS = 100


@dataclass
class Contact:
    """One entry of the contact book."""

    name: str
    sex: str
    age: int
    tel: str
    addr: str


class ContactBookFull(Exception):
    """Raised when adding to a book that holds its maximum of contacts."""


class ContactNotFound(LookupError):
    """Raised when no contact has the requested name."""


class ContactBook:
    """Contacts kept in insertion order, looked up by name."""

    def __init__(self, capacity: int = MAX_CONTACTS) -> None:
        self.capacity = capacity
        self._contacts: list[Contact] = []

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def __getitem__(self, index: int) -> Contact:
        return self._contacts[index]

    @property
    def is_full(self) -> bool:
        return len(self._contacts) >= self.capacity

    def add(self, contact: Contact) -> None:
        if self.is_full:
            raise ContactBookFull(f"the book already holds {self.capacity} contacts")
        self._contacts.append(contact)

    def find(self, name: str) -> int:
        """0-based index of the first contact named ``name``."""
        for index, contact in enumerate(self._contacts):
            if contact.name == name:
                return index
        raise ContactNotFound(name)

    def remove(self, name: str) -> Contact:
        """Remove and return the first contact named ``name``."""
        return self._contacts.pop(self.find(name))

    def update(self, name: str, contact: Contact) -> None:
        """Replace the first contact named ``name`` with ``contact``."""
        self._contacts[self.find(name)] = contact


def format_contact(contact: Contact) -> str:
    return "\n".join(
        [
            f"姓名：{contact.name}",
            f"性别：{contact.sex}",
            f"年龄：{contact.age}",
            f"电话号码：{contact.tel}",
            f"家庭住址：{contact.addr}",
        ]
    )


class Select(IntEnum):
    EXIT = 0
    ADD = 1
    DEL = 2
    MODIFY = 3
    SEARCH = 4
    SHOWALL = 5


_MENU_ITEMS = (
    "***********************************",
    "**************0. exit    **********",
    "**************1. add     **********",
    "**************2. del     **********",
    "**************3. modify  **********",
    "**************4. search  **********",
    "**************5. showall **********",
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_contact(ask: Callable[[str], str]) -> Contact:
    name = ask("请输入联系人的姓名：")
    sex = ask("请输入联系人的性别：")
    age = int(ask("请输入联系人的年龄："))
    tel = ask("请输入联系人的电话号码：")
    addr = ask("请输入联系人的家庭住址：")
    return Contact(name, sex, age, tel, addr)


def _show_all(book: ContactBook) -> None:
    if len(book) == 0:
        print("通讯录为空，请先添加联系人信息!")
        return
    for contact in book:
        print(format_contact(contact))
        print()


def _run(book: ContactBook, tokens: Iterable[str]) -> None:
    stream = iter(tokens)

    def ask(prompt: str) -> str:
        print(prompt)
        return next(stream)

    for item in _MENU_ITEMS:
        print("\t\t\t\t" + item)
    while True:
        raw = ask("请输入你的操作:")
        try:
            select = Select(int(raw))
        except ValueError:
            print("输入错误，请重新输入选项!")
            continue
        if select is Select.EXIT:
            return
        if select is Select.ADD:
            if book.is_full:
                print("通讯录已满，存入失败!")
                continue
            try:
                contact = _read_contact(ask)
            except ValueError:
                print("输入错误，请重新输入选项!")
                continue
            book.add(contact)
            print("存放成功!")
        elif select is Select.DEL:
            name = ask("请输入要删除人的姓名:")
            try:
                book.remove(name)
            except ContactNotFound:
                print("查无此人！")
            else:
                print("删除成功!")
        elif select is Select.MODIFY:
            name = ask("请输入要修改人的姓名:")
            try:
                book.find(name)
            except ContactNotFound:
                print("查无此人，修改失败！")
                continue
            try:
                contact = _read_contact(ask)
            except ValueError:
                print("输入错误，请重新输入选项!")
                continue
            book.update(name, contact)
            print("修改成功!")
        elif select is Select.SEARCH:
            name = ask("请输入要查找人的姓名:")
            try:
                index = book.find(name)
            except ContactNotFound:
                print("查无此人！")
            else:
                print(f"第{index}位联系人的信息:")
                print(format_contact(book[index]))
                print()
        else:
            _show_all(book)


def main(argv: Optional[list] = None) -> int:
    """Run the interactive contact book on standard input."""
    try:
        _run(ContactBook(), _tokens(sys.stdin))
    except StopIteration:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())