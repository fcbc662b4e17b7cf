"""Tests for one-shot notices."""

from offers.notice.notice import Notice, NoticeBoard, NoticeKind


def _notice(kind=NoticeKind.FETCH_ERROR, message="Boom"):
    return Notice(kind=kind, title="Error", message=message)


class TestNoticeBoard:
    def test_drain_returns_in_posting_order(self):
        board = NoticeBoard()
        board.post(_notice(message="first"))
        board.post(_notice(message="second"))
        assert [n.message for n in board.drain()] == ["first", "second"]

    def test_drain_is_one_shot(self):
        board = NoticeBoard()
        board.post(_notice())
        board.drain()
        assert board.drain() == []

    def test_peek_does_not_consume(self):
        board = NoticeBoard()
        board.post(_notice())
        assert len(board.peek()) == 1
        assert len(board.drain()) == 1

    def test_closed_board_drops_posts(self):
        board = NoticeBoard()
        board.post(_notice())
        board.close()
        board.post(_notice())
        assert board.closed is True
        assert board.drain() == []


class TestNotice:
    def test_error_kinds(self):
        assert _notice(NoticeKind.FETCH_ERROR).is_error is True
        assert _notice(NoticeKind.SUBMISSION_ERROR).is_error is True
        assert _notice(NoticeKind.ORDER_PLACED).is_error is False
