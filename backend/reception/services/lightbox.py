"""Photo gallery and its lightbox viewer state."""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class GalleryPhoto:
    src: str
    alt: str


def build_gallery(count: int, couple_names: str) -> list[GalleryPhoto]:
    """Photos are numbered 1..count under /static/photos/."""
    return [
        GalleryPhoto(src=f"/static/photos/{n}.jpeg", alt=f"{couple_names} photo {n}")
        for n in range(1, count + 1)
    ]


@dataclass(frozen=True)
class Lightbox:
    """Viewer state: closed when index is None, otherwise showing photo `index`.

    Transitions return a new Lightbox and never touch the gallery itself.
    """

    count: int
    index: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.index is not None

    def open_at(self, index: int) -> "Lightbox":
        if index < 0 or index >= self.count:
            return self
        return replace(self, index=index)

    def close(self) -> "Lightbox":
        return replace(self, index=None)

    def next(self) -> "Lightbox":
        if self.index is None:
            return self
        return replace(self, index=(self.index + 1) % self.count)

    def previous(self) -> "Lightbox":
        if self.index is None:
            return self
        return replace(self, index=(self.index - 1) % self.count)

    def handle_key(self, key: str) -> "Lightbox":
        if key == "Escape":
            return self.close()
        if key == "ArrowRight":
            return self.next()
        if key == "ArrowLeft":
            return self.previous()
        return self


def lightbox_from_query(count: int, photo: Optional[str]) -> Lightbox:
    """Open the viewer at the ?photo= index if it names a real photo."""
    box = Lightbox(count=count)
    if photo is None:
        return box
    try:
        index = int(photo)
    except ValueError:
        return box
    return box.open_at(index)
