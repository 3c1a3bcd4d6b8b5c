from __future__ import annotations

from ._utils import iter_source_files, matches_prefix, ob_root, parse_imports

ALLOWLIST = {"platform/process.py"}


def test_subprocess_only_in_process_module() -> None:
    root = ob_root()
    offenders: list[str] = []

    for file_path in iter_source_files(root):
        rel = file_path.relative_to(root).as_posix()
        if rel in ALLOWLIST:
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "subprocess"):
                offenders.append(f"{rel}:{item.line}: subprocess import outside allowlist")

    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)


def test_rich_only_in_console() -> None:
    root = ob_root()
    offenders: list[str] = []

    for file_path in iter_source_files(root):
        rel = file_path.relative_to(root).as_posix()
        if rel == "output/console.py":
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)
