"""
================================================================================
File Upload Page Object (Async / Playwright)
================================================================================

Single file input, multiple file input and the drag-and-drop area.

Uploaded names are verified against the rendered page rather than a
specific list element; the page shows them in several places depending on
the upload method.

================================================================================
"""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path
from typing import Iterable, List, Sequence, Union

import allure
from loguru import logger
from playwright.async_api import Locator, expect

from testsuites.ui_testing.data import upload_file_path
from testsuites.ui_testing.framework.page_base import PageBase


PathLike = Union[str, Path]

VALIDATION_ERROR = "[class*='error'], .error-message, [data-testid='error']"

# Builds a DataTransfer from base64 payloads and drops it on the target
_DROP_SCRIPT = """
([element, files]) => {
    const dataTransfer = new DataTransfer();
    for (const f of files) {
        const bytes = Uint8Array.from(atob(f.content), c => c.charCodeAt(0));
        dataTransfer.items.add(new File([bytes], f.name, { type: f.type }));
    }
    for (const type of ["dragenter", "dragover", "drop"]) {
        element.dispatchEvent(new DragEvent(type, { bubbles: true, cancelable: true, dataTransfer }));
    }
}
"""


def _file_payload(path: PathLike) -> dict:
    path = Path(path)
    return {
        "name": path.name,
        "type": mimetypes.guess_type(path.name)[0] or "application/octet-stream",
        "content": base64.b64encode(path.read_bytes()).decode("ascii"),
    }


class FileUploadPage(PageBase):
    """File upload page object (async)."""

    URL_PATH = "/file-upload"
    PAGE_TITLE = "File Upload"
    NAV_SELECTOR = "a[href='/file-upload']"

    UPLOAD_SETTLE_MS = 500

    @property
    def single_file_input(self) -> Locator:
        return self.page.locator("#single-file")

    @property
    def multiple_files_input(self) -> Locator:
        return self.page.locator("#multiple-files")

    @property
    def drag_drop_area(self) -> Locator:
        return self.page.locator(
            "[data-testid='drag-drop-area'], .dropzone, [class*='drop']"
        ).first

    @property
    def file_items(self) -> Locator:
        return self.page.locator("[data-testid='file-item'], .file-item, [class*='file-item']")

    @property
    def drop_file_list(self) -> Locator:
        return self.page.locator("[data-testid='drop-file-list'], #drop-file-list").first

    @property
    def single_file_name(self) -> Locator:
        return self.page.locator("[data-testid='single-file-name'], #single-file-name").first

    @staticmethod
    def upload_file_path(name: str) -> Path:
        """Path of a bundled upload fixture file."""
        return upload_file_path(name)

    @allure.step("Open file upload page")
    async def open(self) -> "FileUploadPage":
        await super().open()
        return self

    @allure.step("Verify file upload page loaded")
    async def verify_page_loaded(self) -> None:
        await expect(self.single_file_input).to_be_visible()
        await expect(self.multiple_files_input).to_be_visible()

    # =========================================================================
    # Uploads
    # =========================================================================

    @allure.step("Upload single file")
    async def upload_single_file(self, file_path: PathLike) -> None:
        logger.debug(f"Uploading single file: {file_path}")
        await self.single_file_input.set_input_files(str(file_path))
        await self.settle(self.UPLOAD_SETTLE_MS)

    async def clear_single_file(self) -> None:
        await self.single_file_input.set_input_files([])

    @allure.step("Upload multiple files")
    async def upload_multiple_files(self, file_paths: Sequence[PathLike]) -> None:
        logger.debug(f"Uploading {len(file_paths)} files")
        await self.multiple_files_input.set_input_files([str(p) for p in file_paths])
        await self.settle(self.UPLOAD_SETTLE_MS)

    async def clear_multiple_files(self) -> None:
        await self.multiple_files_input.set_input_files([])

    @allure.step("Drag and drop files")
    async def drag_and_drop_files(self, file_paths: Sequence[PathLike]) -> None:
        """
        Upload through the drop area.

        Uses the file input inside the drop zone when there is one, otherwise
        dispatches a synthetic drop event carrying the file contents.
        """
        zone_input = self.drag_drop_area.locator("input[type='file']")
        if await zone_input.count() > 0:
            await zone_input.first.set_input_files([str(p) for p in file_paths])
        else:
            payload = [_file_payload(p) for p in file_paths]
            handle = await self.drag_drop_area.element_handle()
            await self.page.evaluate(_DROP_SCRIPT, [handle, payload])
        await self.settle(self.UPLOAD_SETTLE_MS)

    async def is_drag_drop_available(self) -> bool:
        return await self.drag_drop_area.is_visible()

    async def scroll_to_bottom(self) -> None:
        await self.page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")
        await self.settle(self.UPLOAD_SETTLE_MS)

    # =========================================================================
    # Verification
    # =========================================================================

    async def is_file_listed(self, file_name: str) -> bool:
        """Whether `file_name` appears anywhere in the rendered page."""
        await self.settle(self.UPLOAD_SETTLE_MS)
        return file_name in await self.page.content()

    async def are_files_listed(self, file_names: Iterable[str]) -> bool:
        await self.settle(self.UPLOAD_SETTLE_MS)
        content = await self.page.content()
        missing = [name for name in file_names if name not in content]
        if missing:
            logger.warning(f"Files not listed on page: {missing}")
        return not missing

    async def get_single_file_name(self) -> str:
        return await self.text_or_empty(self.single_file_name, 2000)

    async def get_multiple_files_count(self) -> int:
        return await self.file_items.count()

    async def get_multiple_file_names(self) -> List[str]:
        texts = await self.file_items.all_text_contents()
        return [t.strip() for t in texts if t.strip()]

    async def get_drag_drop_file_names(self) -> List[str]:
        text = await self.text_or_empty(self.drop_file_list, 2000)
        return [line.strip() for line in text.splitlines() if line.strip()]

    async def has_validation_error(self) -> bool:
        return await self.page.locator(VALIDATION_ERROR).first.is_visible()

    async def get_validation_error_message(self) -> str:
        return await self.text_or_empty(self.page.locator(VALIDATION_ERROR).first, 1000)
