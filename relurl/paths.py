# -*- coding: utf-8 -*-
"""
Bu dosyada, url içermeyen düz yollar için yardımcılar bulunur.
-----------------------------------------------------------------------
This file holds helpers for plain (non-url) paths.

>>> makeRelative("/a/b", "/a")
'b'
>>> makeRelative("/images.html", "/faq")
'../images.html'
"""
import logging
import posixpath

pathlogger = logging.getLogger("relurl.paths")


class PathError(ValueError):
    "Raised if a path can't be made relative to the given base path."


def canonicalize(path):
    """
    Verilen yolu sadeleştirir. Ters bölü işaretleri düz bölüye çevrilir,
    "." ve ".." parçaları çözülür. Sonuç "." ise boş karakter dizisi
    döndürülür.
    -----------------------------------------------------------------------
    Returns the canonical form of a plain path. Backslashes become slashes,
    "." and ".." segments are resolved and duplicate slashes are dropped.
    Leading ".." segments of relative paths are kept.

    >>> canonicalize("/foo/./bar/../baz/")
    '/foo/baz'
    >>> canonicalize("../foo\\\\bar")
    '../foo/bar'
    >>> canonicalize("foo/..")
    ''
    """
    if not path:
        return ""

    canonical = posixpath.normpath(path.replace("\\", "/"))

    # posix keeps exactly two leading slashes
    if canonical.startswith("//"):
        canonical = "/" + canonical.lstrip("/")

    if canonical == posixpath.curdir:
        return ""
    return canonical


def _segments(path):
    return [part for part in path.split("/") if part]


def makeRelative(path, basePath):
    """
    İlk argüman olarak verilen yolu, ikinci argümana göre göreceli hale
    getirir. Biri mutlak, diğeri göreceli yollar için hata verir.
    -----------------------------------------------------------------------
    Turns path into a path relative to basePath. Both arguments are
    canonicalized first. A relative path given with an absolute base is
    considered relative to that base already and returned as is. An
    absolute path can't be made relative to a relative base; PathError is
    raised in that case.

    Returns an empty string if both paths point to the same place.
    """
    path = canonicalize(path)
    basePath = canonicalize(basePath)

    isAbsolute = path.startswith("/")
    baseIsAbsolute = basePath.startswith("/")

    if baseIsAbsolute and not isAbsolute:
        pathlogger.debug("%r is already relative to %r" % (path, basePath))
        return path

    if isAbsolute and not baseIsAbsolute:
        raise PathError(
            'The absolute path "%s" cannot be made relative to the relative '
            'path "%s". You should provide an absolute base path instead.'
            % (path, basePath))

    parts = _segments(path)
    baseParts = _segments(basePath)

    common = 0
    for part, basePart in zip(parts, baseParts):
        if part != basePart:
            break
        common += 1

    remaining = baseParts[common:]
    if posixpath.pardir in remaining:
        raise PathError(
            'The path "%s" cannot be made relative to "%s" without knowing '
            'the current directory.' % (path, basePath))

    relative = [posixpath.pardir] * len(remaining) + parts[common:]
    result = "/".join(relative)
    pathlogger.debug("%r relative to %r is %r" % (path, basePath, result))
    return result
