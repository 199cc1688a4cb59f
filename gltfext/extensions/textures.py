"""Texture source extensions: EXT_texture_webp and KHR_texture_basisu.

Both redirect a texture to an alternative image (WebP, KTX2 with Basis
Universal supercompression).  Only the image index is carried here; decoding
the image itself is the host's business.
"""

from __future__ import annotations

from typing import ClassVar

from gltfext.codec import box
from gltfext.extensions.base import ExtensionModel, UInt32
from gltfext.registry import ParentKind

WEBP_EXTENSION_NAME = "EXT_texture_webp"
BASISU_EXTENSION_NAME = "KHR_texture_basisu"


class TextureWebp(ExtensionModel):
    """WebP image source.  ``source`` may be absent when the texture has none."""

    extension_name: ClassVar[str] = WEBP_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.TEXTURE

    source: UInt32 | None = None

    def set_source(self, source: int) -> None:
        self._assign("source", box(source))

    def get_source(self) -> int | None:
        return self.source


class TextureBasisu(ExtensionModel):
    """KTX2 image source; ``source`` is required."""

    extension_name: ClassVar[str] = BASISU_EXTENSION_NAME
    parent_kind: ClassVar[ParentKind] = ParentKind.TEXTURE

    source: UInt32

    def set_source(self, source: int) -> None:
        self._assign("source", box(source))

    def get_source(self) -> int:
        return self.source
