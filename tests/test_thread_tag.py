"""Tests for the per-thread message prefix."""

import threading

from logsink.thread_tag import clear_thread_tag, get_thread_tag, set_thread_tag


class TestThreadTag:
    def teardown_method(self):
        clear_thread_tag()

    def test_empty_by_default(self):
        seen = []
        t = threading.Thread(target=lambda: seen.append(get_thread_tag()))
        t.start()
        t.join()
        assert seen == [""]

    def test_set_and_get(self):
        set_thread_tag("[worker-1] ")
        assert get_thread_tag() == "[worker-1] "

    def test_isolated_between_threads(self):
        set_thread_tag("main ")
        seen = []

        def worker():
            set_thread_tag("other ")
            seen.append(get_thread_tag())

        t = threading.Thread(target=worker)
        t.start()
        t.join()
        assert seen == ["other "]
        assert get_thread_tag() == "main "

    def test_clear(self):
        set_thread_tag("x")
        clear_thread_tag()
        assert get_thread_tag() == ""
