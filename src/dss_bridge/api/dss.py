# src/dss_bridge/api/dss.py
"""
`IDSS`, the entry object of the classic API.

One `IDSS` wraps one `DSSContext`. Engines created with `IDSS.create()` own a
fresh context; `IDSS.create(prime=True)` attaches to the library's prime
instance instead, and `new_context()` spawns further independent engines from
the same library.
"""
import logging
from typing import List, Optional

from ..config.settings import BindingConfig
from ..context import DSSContext
from ..log_config import set_package_log_level
from ..native.library import NativeLibrary, load_library
from .base import Base
from .circuit import ICircuit
from .text import IText

logger = logging.getLogger(__name__)


class IDSS(Base):

    def __init__(self, ctx: DSSContext):
        super().__init__(ctx)
        self.text = IText(ctx)
        self.active_circuit = ICircuit(ctx)

    @classmethod
    def create(
        cls,
        config: Optional[BindingConfig] = None,
        prime: bool = False,
        library: Optional[NativeLibrary] = None,
    ) -> "IDSS":
        """
        Creates an engine from a configuration.

        Args:
            config: Library location and engine options. Defaults are used when None.
            prime: Attach to the prime context instead of creating a new one.
            library: An already-loaded library; overrides `config.library`.
        """
        config = config if config is not None else BindingConfig()
        if config.log_level is not None:
            set_package_log_level(config.log_level)
        if library is None:
            library = load_library(config.library.path, debug=config.library.debug)
        ctx = DSSContext.prime(library) if prime else DSSContext.new(library)
        engine = cls(ctx)
        try:
            engine.apply_config(config)
        except Exception:
            ctx.close()
            raise
        return engine

    def new_context(self) -> "IDSS":
        """Returns an independent engine backed by a new context of the same library."""
        return type(self)(self._ctx.new_context())

    def apply_config(self, config: BindingConfig) -> None:
        """Applies the engine section of a configuration to this context."""
        engine = config.engine
        self.allow_change_dir = engine.allow_change_dir
        self.allow_forms = engine.allow_forms
        if engine.compat_flags is not None:
            self.compat_flags = engine.compat_flags
        logger.debug(f"Applied engine options to {self._ctx!r}: {engine}")

    # --- commands ---

    def command(self, command: str) -> str:
        """Runs a text command and returns the engine's text result."""
        return self.text.run(command)

    def clear_all(self) -> None:
        self._ctx.call("ctx_DSS_ClearAll")

    def reset(self) -> None:
        self._ctx.call("ctx_DSS_Reset")

    def new_circuit(self, name: str) -> ICircuit:
        """Creates a new circuit named `name` and makes it active."""
        self._ctx.set_text("ctx_DSS_NewCircuit", name)
        return self.active_circuit

    # --- engine information ---

    @property
    def version(self) -> str:
        return self._ctx.get_text("ctx_DSS_Get_Version")

    @property
    def num_circuits(self) -> int:
        return self._get_int("ctx_DSS_Get_NumCircuits")

    @property
    def classes(self) -> List[str]:
        """Names of all intrinsic element classes."""
        return self._ctx.get_string_array("ctx_DSS_Get_Classes")

    @property
    def user_classes(self) -> List[str]:
        return self._ctx.get_string_array("ctx_DSS_Get_UserClasses")

    # --- engine options ---

    @property
    def allow_change_dir(self) -> bool:
        """Whether scripts may change the process working directory."""
        return self._get_bool("ctx_DSS_Get_AllowChangeDir")

    @allow_change_dir.setter
    def allow_change_dir(self, value: bool) -> None:
        self._set_bool("ctx_DSS_Set_AllowChangeDir", value)

    @property
    def allow_forms(self) -> bool:
        return self._get_bool("ctx_DSS_Get_AllowForms")

    @allow_forms.setter
    def allow_forms(self, value: bool) -> None:
        self._set_bool("ctx_DSS_Set_AllowForms", value)

    @property
    def compat_flags(self) -> int:
        return self._get_int("ctx_DSS_Get_CompatFlags")

    @compat_flags.setter
    def compat_flags(self, value: int) -> None:
        self._set_int("ctx_DSS_Set_CompatFlags", value)

    # --- lifecycle ---

    def close(self) -> None:
        self._ctx.close()

    def __enter__(self) -> "IDSS":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def __repr__(self):
        return f"<IDSS {self._ctx!r}>"
