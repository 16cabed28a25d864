"""Read-only access to the documentation content tree.

The store sits on top of a small directory abstraction (``ContentSource``) so
the same traversal and lookup rules apply to a real content directory and to
an in-memory tree used by tests. Slugs are derived from root-relative paths:
extensions are stripped, separators become ``/``, and an ``index`` document
stands for its directory.

Example
-------
>>> from docs_pages.content.store import ContentStore, MemorySource
>>> store = ContentStore(MemorySource({"sdks/index.md": "# SDKs"}))
>>> store.list_all()
['sdks']
>>> store.read("sdks").path.as_posix()
'sdks/index.md'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import posixpath
import typing as typ
from pathlib import Path, PurePosixPath

from docs_pages._constants import CONTENT_EXTENSIONS, INDEX_STEM, SLUG_SEGMENT_PATTERN

from .errors import ContentReadError, NotFound

logger = logging.getLogger(__name__)

ROOT = PurePosixPath()


@dc.dataclass(frozen=True, slots=True)
class ContentDocument:
    """A content file addressed by its canonical slug.

    Attributes
    ----------
    slug : tuple[str, ...]
        Ordered slug segments, e.g. ``("advanced", "embedding-modes")``.
    path : PurePosixPath
        Root-relative path of the backing file.
    raw : str
        Unparsed document text, front matter included.
    """

    slug: tuple[str, ...]
    path: PurePosixPath
    raw: str

    @property
    def slug_path(self) -> str:
        """Return the canonical ``/``-joined slug."""
        return "/".join(self.slug)


class ContentSource(typ.Protocol):
    """Directory abstraction walked by :class:`ContentStore`.

    Paths are root-relative ``PurePosixPath`` values; ``PurePosixPath()``
    denotes the root itself. Listing and reading raise ``OSError`` on failure.
    """

    def list_entries(self, path: PurePosixPath) -> list[str]: ...

    def is_container(self, path: PurePosixPath) -> bool: ...

    def is_leaf(self, path: PurePosixPath) -> bool: ...

    def read_text(self, path: PurePosixPath) -> str: ...

    def within_root(self, path: PurePosixPath) -> bool: ...

    def identity(self, path: PurePosixPath) -> str: ...


class FileSystemSource:
    """Serve content from a directory on disk."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def __str__(self) -> str:
        return str(self.root)

    def _locate(self, path: PurePosixPath) -> Path:
        return self.root.joinpath(*path.parts)

    def list_entries(self, path: PurePosixPath) -> list[str]:
        """Return entry names directly below ``path``."""
        return [entry.name for entry in self._locate(path).iterdir()]

    def is_container(self, path: PurePosixPath) -> bool:
        """Return True when ``path`` is a directory."""
        return self._locate(path).is_dir()

    def is_leaf(self, path: PurePosixPath) -> bool:
        """Return True when ``path`` is a regular file."""
        return self._locate(path).is_file()

    def read_text(self, path: PurePosixPath) -> str:
        """Return the UTF-8 text stored at ``path``."""
        return self._locate(path).read_text(encoding="utf-8")

    def within_root(self, path: PurePosixPath) -> bool:
        """Return True when ``path`` resolves inside the root, symlinks included."""
        try:
            resolved = self._locate(path).resolve()
        except (OSError, RuntimeError):  # symlink loops
            return False
        return resolved.is_relative_to(self.root.resolve())

    def identity(self, path: PurePosixPath) -> str:
        """Return the fully resolved location of ``path``."""
        return str(self._locate(path).resolve())


class MemorySource:
    """Serve content from a mapping of root-relative paths to text.

    Directories are implied by the file paths, mirroring how a content tree
    on disk would look.
    """

    def __init__(self, files: typ.Mapping[str, str]) -> None:
        self.files = {PurePosixPath(name): text for name, text in files.items()}
        self._dirs: set[PurePosixPath] = {ROOT}
        for name in self.files:
            self._dirs.update(name.parents)

    def __str__(self) -> str:
        return "<memory>"

    def list_entries(self, path: PurePosixPath) -> list[str]:
        """Return entry names directly below ``path``."""
        if path not in self._dirs:
            msg = f"No such directory: '{path}'"
            raise FileNotFoundError(msg)
        children = {
            candidate.name
            for candidate in (*self.files, *self._dirs)
            if candidate != ROOT and candidate.parent == path
        }
        return sorted(children)

    def is_container(self, path: PurePosixPath) -> bool:
        """Return True when ``path`` is an implied directory."""
        return path in self._dirs

    def is_leaf(self, path: PurePosixPath) -> bool:
        """Return True when ``path`` names a stored file."""
        return path in self.files

    def read_text(self, path: PurePosixPath) -> str:
        """Return the stored text for ``path``."""
        try:
            return self.files[path]
        except KeyError as exc:
            msg = f"No such file: '{path}'"
            raise FileNotFoundError(msg) from exc

    def within_root(self, path: PurePosixPath) -> bool:
        """Return True when ``path`` does not climb above the root."""
        normalized = posixpath.normpath(path.as_posix())
        return not (normalized.startswith(("..", "/")))

    def identity(self, path: PurePosixPath) -> str:
        """Return the normalized form of ``path``."""
        return posixpath.normpath(path.as_posix())


class ContentStore:
    """Enumerate and read documents from a :class:`ContentSource`."""

    def __init__(self, source: ContentSource) -> None:
        self.source = source

    @classmethod
    def from_directory(cls, root: Path) -> ContentStore:
        """Return a store backed by the content directory at ``root``."""
        return cls(FileSystemSource(root))

    def list_all(self) -> list[str]:
        """Return every canonical slug in the tree, sorted lexicographically.

        Returns
        -------
        list[str]
            ``/``-joined slugs, one per addressable document.

        Raises
        ------
        ContentReadError
            If the root itself cannot be listed (for example, it is missing).

        Notes
        -----
        Hidden entries are ignored. Unreadable subdirectories are logged and
        skipped, as are entries that resolve outside the root and directory
        links back to one of their own parents. Files whose names do not form
        valid slug segments, or that would need an ``index`` segment, are
        skipped too, so every listed slug reads back the file it came from.
        """
        slugs: set[str] = set()
        pending: list[tuple[PurePosixPath, frozenset[str]]] = [
            (ROOT, frozenset({self.source.identity(ROOT)}))
        ]
        while pending:
            current, ancestors = pending.pop()
            try:
                names = self.source.list_entries(current)
            except OSError as exc:
                if current == ROOT:
                    raise ContentReadError(str(self.source), str(exc)) from exc
                logger.warning("Skipping unreadable directory '%s': %s", current, exc)
                continue
            for name in sorted(names):
                if name.startswith("."):
                    continue
                entry = current / name
                if not self.source.within_root(entry):
                    logger.warning("Skipping '%s': it resolves outside the root", entry)
                    continue
                if self.source.is_container(entry):
                    key = self.source.identity(entry)
                    if key in ancestors:
                        logger.warning("Skipping '%s': it links back to a parent", entry)
                        continue
                    pending.append((entry, ancestors | {key}))
                    continue
                slug = self._slug_for(entry)
                if slug is None:
                    continue
                if slug in slugs:
                    logger.debug("Slug '%s' already provided; ignoring '%s'", slug, entry)
                    continue
                slugs.add(slug)
        return sorted(slugs)

    def read(self, slug: str) -> ContentDocument:
        """Return the document addressed by ``slug``.

        A direct file (``<slug>.md`` / ``<slug>.mdx``) wins over a directory
        index (``<slug>/index.md`` / ``<slug>/index.mdx``). ``index`` is never a
        slug segment; such slugs are reported as missing.

        Raises
        ------
        NotFound
            If no file matches or the slug would escape the content root.
        ContentReadError
            If the matching file exists but cannot be read.
        """
        base = PurePosixPath(slug)
        if (
            not slug
            or base.is_absolute()
            or ".." in base.parts
            or INDEX_STEM in base.parts
        ):
            raise NotFound(slug)
        for candidate in _candidate_paths(base):
            if not self.source.within_root(candidate):
                raise NotFound(slug)
            if not self.source.is_leaf(candidate):
                continue
            try:
                raw = self.source.read_text(candidate)
            except (OSError, UnicodeDecodeError) as exc:
                raise ContentReadError(candidate.as_posix(), str(exc)) from exc
            return ContentDocument(slug=base.parts, path=candidate, raw=raw)
        raise NotFound(slug)

    @staticmethod
    def _slug_for(entry: PurePosixPath) -> str | None:
        """Return the canonical slug for a content file, or None to skip it."""
        if entry.suffix not in CONTENT_EXTENSIONS:
            return None
        parts = entry.with_suffix("").parts
        if parts[-1] == INDEX_STEM:
            parts = parts[:-1]
        if not parts:
            return None
        if INDEX_STEM in parts:
            logger.warning("Skipping '%s': 'index' may only name a directory page", entry)
            return None
        if not all(SLUG_SEGMENT_PATTERN.fullmatch(part) for part in parts):
            logger.warning("Skipping '%s': file name is not a valid slug", entry)
            return None
        return "/".join(parts)


def _candidate_paths(base: PurePosixPath) -> list[PurePosixPath]:
    """Return lookup candidates for ``base`` in resolution order."""
    direct = [base.with_name(base.name + ext) for ext in CONTENT_EXTENSIONS]
    index = [base / f"{INDEX_STEM}{ext}" for ext in CONTENT_EXTENSIONS]
    return direct + index


__all__ = [
    "ContentDocument",
    "ContentSource",
    "ContentStore",
    "FileSystemSource",
    "MemorySource",
]
