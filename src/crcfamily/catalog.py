# catalog.py
from __future__ import annotations

from typing import Callable, Dict, Optional
import importlib
import pkgutil

from crcfamily.engine.compute import BytesLike
from crcfamily.engine.params import ParamSet

FAMILIES_PACKAGE = "crcfamily.families"


def available_modules() -> list[str]:
    """
    Enumerate CRC family modules under crcfamily/families.
    """
    pkg = importlib.import_module(FAMILIES_PACKAGE)
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_family_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("family module name must be a non-empty string")
    mod = importlib.import_module(f"{FAMILIES_PACKAGE}.{name}")
    if not hasattr(mod, "VARIANTS") or not hasattr(mod, "CHECKSUMS"):
        raise AttributeError(f"family module '{name}' missing VARIANTS/CHECKSUMS")
    return mod


def _collect() -> tuple[Dict[str, ParamSet], Dict[str, Callable[..., int]]]:
    params: Dict[str, ParamSet] = {}
    funcs: Dict[str, Callable[..., int]] = {}
    for name in available_modules():
        mod = _import_family_module(name)
        for key, p in mod.VARIANTS.items():
            if key in params:
                raise ValueError(f"variant '{key}' defined twice (module '{name}')")
            params[key] = p
        for key, fn in mod.CHECKSUMS.items():
            if key in funcs:
                raise ValueError(f"variant '{key}' defined twice (module '{name}')")
            funcs[key] = fn
    return params, funcs


def available_variants() -> list[str]:
    _, funcs = _collect()
    return sorted(funcs)


def get_params(variant: str) -> ParamSet:
    """
    ParamSet of a table-driven variant. Sick has no ParamSet (it is not
    table driven) and raises like an unknown name.
    """
    params, _ = _collect()
    p = params.get(variant)
    if p is None:
        raise ValueError(
            f"no parameter set for variant '{variant}'; table-driven variants: {sorted(params)}"
        )
    return p


def checksum(data: Optional[BytesLike], *, variant: str, length: Optional[int] = None) -> int:
    """
    Whole-buffer checksum by variant name, e.g. checksum(b"...", variant="crc32").
    """
    _, funcs = _collect()
    fn = funcs.get(variant)
    if fn is None:
        raise ValueError(f"unknown variant '{variant}'; available: {sorted(funcs)}")
    return fn(data, length)
