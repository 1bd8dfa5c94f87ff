"""
In-memory stand-ins for the Playwright objects the framework touches.

A FakePage knows which selectors are visible/attached and what text they
render; every interaction is appended to `page.actions` as
(action, selector, value).

Selector lists ("a, b") match when any listed selector matches.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple


class FakeTimeoutError(Exception):
    pass


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str):
        self.page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(self.page, f"{self.selector} >> {selector}")

    def _parts(self) -> List[str]:
        return [part.strip() for part in self.selector.split(",")]

    def _visible(self) -> bool:
        return any(part in self.page.visible for part in self._parts())

    def _attached(self) -> bool:
        return self._visible() or any(part in self.page.attached for part in self._parts())

    def _text(self) -> str:
        for part in self._parts():
            if part in self.page.texts:
                return self.page.texts[part]
        return ""

    async def wait_for(self, state: str = "visible", timeout: Optional[int] = None) -> None:
        ok = self._attached() if state == "attached" else self._visible()
        if state == "hidden":
            ok = not self._visible()
        if not ok:
            raise FakeTimeoutError(f"Timeout {timeout}ms waiting for {self.selector} to be {state}")

    async def is_visible(self) -> bool:
        return self._visible()

    async def click(self, **kwargs: Any) -> None:
        self.page.actions.append(("click", self.selector, None))

    async def fill(self, value: str, **kwargs: Any) -> None:
        self.page.actions.append(("fill", self.selector, value))

    async def select_option(self, label: str) -> None:
        self.page.actions.append(("select", self.selector, label))

    async def set_input_files(self, files: Any) -> None:
        self.page.actions.append(("upload", self.selector, files))

    async def check(self) -> None:
        self.page.actions.append(("check", self.selector, None))

    async def blur(self) -> None:
        self.page.actions.append(("blur", self.selector, None))

    async def text_content(self) -> str:
        return self._text()

    async def inner_text(self) -> str:
        return self._text()


class FakePage:
    def __init__(
        self,
        visible: Optional[Set[str]] = None,
        attached: Optional[Set[str]] = None,
        texts: Optional[Dict[str, str]] = None,
    ):
        self.visible: Set[str] = set(visible or ())
        self.attached: Set[str] = set(attached or ())
        self.texts: Dict[str, str] = dict(texts or {})
        self.actions: List[Tuple[str, str, Any]] = []
        self.handlers: Dict[str, list] = {}
        self.url = "about:blank"
        self.closed = False

    def show(self, selector: str, text: str = "") -> None:
        self.visible.add(selector)
        if text:
            self.texts[selector] = text

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    def on(self, event: str, handler: Any) -> None:
        self.handlers.setdefault(event, []).append(handler)

    async def goto(self, url: str, wait_until: str = "load") -> None:
        self.url = url
        self.actions.append(("goto", url, wait_until))

    async def wait_for_load_state(self, state: str = "load", timeout: Optional[int] = None) -> None:
        return None

    async def wait_for_url(self, pattern: str, timeout: Optional[int] = None) -> None:
        self.actions.append(("wait_for_url", pattern, timeout))

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        content = b"\x89PNG\r\n\x1a\nfake"
        if path:
            Path(path).write_bytes(content)
        return content

    def is_closed(self) -> bool:
        return self.closed

    def actions_of(self, kind: str) -> List[Tuple[str, str, Any]]:
        return [a for a in self.actions if a[0] == kind]


class FakeTracing:
    def __init__(self):
        self.started = False
        self.stopped_with: List[Optional[str]] = []

    async def start(self, **kwargs: Any) -> None:
        self.started = True

    async def stop(self, path: Optional[str] = None) -> None:
        self.stopped_with.append(path)
        if path:
            Path(path).write_bytes(b"PK\x05\x06" + b"\x00" * 18)


class FakeContext:
    def __init__(self, options: Dict[str, Any]):
        self.options = options
        self.tracing = FakeTracing()
        self.default_timeout: Optional[int] = None
        self.navigation_timeout: Optional[int] = None
        self.closed = False
        self.pages: List[FakePage] = []

    def set_default_timeout(self, timeout: int) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: int) -> None:
        self.navigation_timeout = timeout

    async def new_page(self) -> FakePage:
        page = FakePage()
        self.pages.append(page)
        return page

    async def close(self) -> None:
        self.closed = True
        for page in self.pages:
            page.closed = True


class FakeBrowser:
    def __init__(self, fail_with: Optional[Exception] = None):
        self.fail_with = fail_with
        self.contexts: List[FakeContext] = []
        self.closed = False

    async def new_context(self, **options: Any) -> FakeContext:
        if self.fail_with is not None:
            raise self.fail_with
        context = FakeContext(options)
        self.contexts.append(context)
        return context

    async def close(self) -> None:
        self.closed = True
