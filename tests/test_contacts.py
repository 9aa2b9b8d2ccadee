import io

import pytest

from drillbook.contacts import (
    MAX_CONTACTS,
    Contact,
    ContactBook,
    ContactBookFull,
    ContactNotFound,
    format_contact,
    main,
)


def make(name, age=30):
    return Contact(name=name, sex="f", age=age, tel=f"tel-{name}", addr=f"{name}-street")


def test_add_and_find():
    book = ContactBook()
    book.add(make("alice"))
    book.add(make("bob"))
    assert book.find("bob") == 1
    assert book[0].name == "alice"
    assert len(book) == 2


def test_find_missing_raises():
    with pytest.raises(ContactNotFound):
        ContactBook().find("nobody")


def test_remove_shifts_later_entries():
    book = ContactBook()
    for name in ("a", "b", "c"):
        book.add(make(name))
    removed = book.remove("a")
    assert removed.name == "a"
    assert [c.name for c in book] == ["b", "c"]
    assert book.find("c") == 1


def test_remove_missing_raises():
    book = ContactBook()
    book.add(make("a"))
    with pytest.raises(ContactNotFound):
        book.remove("z")
    assert len(book) == 1


def test_update_replaces_entry():
    book = ContactBook()
    book.add(make("a", age=20))
    book.update("a", make("a2", age=41))
    assert book[0] == make("a2", age=41)
    with pytest.raises(ContactNotFound):
        book.find("a")


def test_full_book_rejects_more():
    book = ContactBook()
    for number in range(MAX_CONTACTS):
        book.add(make(f"p{number}"))
    assert book.is_full
    with pytest.raises(ContactBookFull):
        book.add(make("extra"))
    assert len(book) == MAX_CONTACTS


def test_format_contact_lines():
    text = format_contact(make("alice", age=33))
    assert text.splitlines() == [
        "姓名：alice",
        "性别：f",
        "年龄：33",
        "电话号码：tel-alice",
        "家庭住址：alice-street",
    ]


def test_main_add_and_show(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 bob m 30 tel-1 home\n5\n4 bob\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "存放成功!" in out
    assert "姓名：bob" in out
    assert "第0位联系人的信息:" in out


def test_main_empty_book(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n2 ghost\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "通讯录为空，请先添加联系人信息!" in out
    assert "查无此人！" in out