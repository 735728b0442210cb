"""System information probes for the verfetch report.

Every probe either returns its values or None; a failing probe never prevents
the rest of the report from rendering.
"""

import platform
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, TypeVar

import psutil
from loguru import logger

UNAVAILABLE = "unavailable"
GIGABYTE = 1024 ** 3

T = TypeVar("T")


def probe(func: Callable[[], T]) -> Optional[T]:
    """Run a probe, turning any failure into None."""
    try:
        return func()
    except Exception as e:
        logger.debug("System probe {} failed: {}", getattr(func, "__name__", func), e)
        return None


def _os_release() -> Dict[str, str]:
    values = {}
    with open("/etc/os-release", "r", encoding="utf-8") as f:
        for line in f:
            key, sep, value = line.strip().partition("=")
            if sep:
                values[key] = value.strip('"')
    return values


def platform_info() -> Dict[str, str]:
    system = platform.system()
    if system == "Linux":
        release = probe(_os_release) or {}
        return {
            "platform": release.get("NAME") or system,
            "version": release.get("VERSION_ID") or release.get("VERSION") or "",
        }
    if system == "Darwin":
        return {"platform": "macOS", "version": platform.mac_ver()[0]}
    if system == "Windows":
        return {"platform": system, "version": platform.version()}
    return {"platform": system, "version": platform.version()}


def kernel_info() -> Dict[str, str]:
    return {"kernel": platform.release(), "arch": platform.machine()}


def _cpu_model() -> str:
    cpuinfo = Path("/proc/cpuinfo")
    if cpuinfo.exists():
        for line in cpuinfo.read_text(encoding="utf-8", errors="replace").splitlines():
            if line.lower().startswith("model name"):
                return line.split(":", 1)[1].strip()
    model = platform.processor()
    if not model:
        raise LookupError("CPU model not reported")
    return model


def _cpu_cores() -> int:
    cores = psutil.cpu_count(logical=False)
    if cores is None:
        raise LookupError("CPU core count not reported")
    return cores


def cpu_info() -> Dict[str, object]:
    return {"model": probe(_cpu_model), "cores": probe(_cpu_cores)}


def memory_info() -> Dict[str, int]:
    vmem = psutil.virtual_memory()
    return {"total": vmem.total, "available": vmem.available, "used": vmem.used}


def disk_info(path: str = "/") -> Dict[str, int]:
    usage = psutil.disk_usage(path)
    return {"total": usage.total, "used": usage.used, "free": usage.free}


def bytes_to_gb(value: int) -> int:
    return value // GIGABYTE


def _field(values: Optional[Dict], key: str, fmt: Callable = str) -> str:
    if not values:
        return UNAVAILABLE
    value = values.get(key)
    if value is None or value == "":
        return UNAVAILABLE
    return fmt(value)


def collect_report(disk_path: str = "/") -> List[Tuple[str, str]]:
    """Gather the verfetch report as (label, value) pairs."""
    os_values = probe(platform_info)
    kernel = probe(kernel_info)
    cpu = probe(cpu_info)
    mem = probe(memory_info)
    disk = probe(lambda: disk_info(disk_path))

    gb = lambda v: f"{bytes_to_gb(v)} GB"

    return [
        ("OS", _field(os_values, "platform")),
        ("OS Version", _field(os_values, "version")),
        ("Kernel", _field(kernel, "kernel")),
        ("Architecture", _field(kernel, "arch")),
        ("CPU", _field(cpu, "model")),
        ("Cores", _field(cpu, "cores")),
        ("Total Memory", _field(mem, "total", gb)),
        ("Available Memory", _field(mem, "available", gb)),
        ("Used Memory", _field(mem, "used", gb)),
        ("Disk Total", _field(disk, "total", gb)),
        ("Disk Used", _field(disk, "used", gb)),
        ("Disk Free", _field(disk, "free", gb)),
    ]
