
import posixpath

def canonicalize_path(cwd: str, path: str) -> str:
    # Lexical only. Build runners hand over slash separated paths.
    if not posixpath.isabs(path):
        path = posixpath.join(cwd, path)

    path = posixpath.normpath(path)

    # normpath keeps exactly two leading slashes (implementation defined on POSIX).
    if path.startswith('//'):
        path = path[1:]

    return path
