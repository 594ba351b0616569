"""Infrastructure: access to the firmware secure-variable sysfs interface.

Layout exposed by the kernel::

    /sys/firmware/secvar/format          backend identifier
    /sys/firmware/secvar/vars/<VAR>/data current contents
    /sys/firmware/secvar/vars/<VAR>/size size of data, decimal text
    /sys/firmware/secvar/vars/<VAR>/update  write a signed update here

Rules
-----
* Every ``OSError`` is re-raised as a
  :class:`~secvarctl.exceptions.SecvarctlError` subclass.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

from pathlib import Path

from secvarctl.exceptions import (
    DescriptorReadError,
    VariableNotFoundError,
    VariableReadError,
    VariableWriteError,
)

SECVAR_ROOT: Path = Path("/sys/firmware/secvar")
SECVAR_FORMAT_PATH: Path = SECVAR_ROOT / "format"
SECVAR_VARS_PATH: Path = SECVAR_ROOT / "vars"


# ---------------------------------------------------------------------------
# Backend descriptor
# ---------------------------------------------------------------------------

class SysfsDescriptor:
    """Concrete :class:`~secvarctl.core.protocols.DescriptorSource`.

    Parameters
    ----------
    path:
        Descriptor file, ``/sys/firmware/secvar/format`` by default.
    """

    def __init__(self, path: Path = SECVAR_FORMAT_PATH) -> None:
        self._path: Path = Path(path)

    @property
    def location(self) -> str:
        return str(self._path)

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self, max_bytes: int) -> bytes:
        """Read at most *max_bytes* bytes from the start of the descriptor."""
        try:
            with self._path.open("rb") as handle:
                return handle.read(max_bytes)
        except OSError as exc:
            raise DescriptorReadError(
                f"could not read {self._path}: {exc.strerror or exc}",
            ) from exc


# ---------------------------------------------------------------------------
# Variable store
# ---------------------------------------------------------------------------

class SecvarStore:
    """Read variables from and submit updates to a secvar ``vars`` directory.

    Parameters
    ----------
    root:
        Directory holding one sub-directory per variable.
    """

    def __init__(self, root: Path = SECVAR_VARS_PATH) -> None:
        self._root: Path = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def has_variable(self, name: str) -> bool:
        return (self._root / name / "data").is_file()

    def read_variable(self, name: str) -> bytes:
        """Return the current contents of variable *name*.

        Raises
        ------
        VariableNotFoundError
            When the variable has no ``data`` file under :attr:`root`.
        VariableReadError
            When the ``data`` file exists but cannot be read.
        """
        data_path = self._root / name / "data"
        if not data_path.is_file():
            raise VariableNotFoundError(
                f"variable {name} not found in {self._root}",
                hint="Use -p to point at a different secvar directory.",
            )
        try:
            data = data_path.read_bytes()
        except OSError as exc:
            raise VariableReadError(
                f"could not read {data_path}: {exc.strerror or exc}",
            ) from exc
        return data[: self._declared_size(name, len(data))]

    def submit_update(self, name: str, data: bytes) -> None:
        """Write *data* to the ``update`` file of variable *name*.

        Raises
        ------
        VariableWriteError
            When the update file is missing or the write fails.
        """
        update_path = self._root / name / "update"
        if not update_path.is_file():
            raise VariableWriteError(
                f"{update_path} does not exist",
                hint="The firmware may not accept updates for this variable.",
            )
        try:
            with update_path.open("wb") as handle:
                handle.write(data)
        except OSError as exc:
            raise VariableWriteError(
                f"could not write {update_path}: {exc.strerror or exc}",
            ) from exc

    def _declared_size(self, name: str, fallback: int) -> int:
        """Return the size advertised in ``<VAR>/size``, else *fallback*."""
        size_path = self._root / name / "size"
        try:
            size = int(size_path.read_text(encoding="ascii").strip())
        except (OSError, ValueError):
            return fallback
        return size if size >= 0 else fallback
