# -*- coding: utf-8 -*-
"""
Bu dosyada, url adreslerini göreceli yollara çeviren yardımcılar bulunur.
-----------------------------------------------------------------------
This file holds helpers that turn urls into relative paths.
"""
import logging

from . import paths

urllogger = logging.getLogger("relurl.urls")

# Only the first occurrence is honored
SCHEME_SEPARATOR = "://"


class InvalidInputError(TypeError):
    "Raised if makeRelative gets an argument that is not a string."


class DomainMismatchError(ValueError):
    "Raised if url and base url have different, non-empty roots."

    def __init__(self, root, baseRoot):
        ValueError.__init__(
            self, 'Domain "%s" doesn\'t equal to base "%s".' % (root, baseRoot))
        self.root = root
        self.baseRoot = baseRoot


def splitUrl(url):
    """
    Verilen url'i kök (şema ve alan adı) ve geri kalan yol olarak ikiye
    ayırır. Url'de "://" yoksa, kök boş karakter dizisidir ve girdinin
    tamamı yol olarak döndürülür.
    ------------------------------------------------------------------------
    Splits an url into its root (scheme and domain) and the remainder.
    If there is no scheme, root is empty and the whole input is returned
    as remainder.

    >>> splitUrl("http://example.com/webmozart")
    ('http://example.com', '/webmozart')
    >>> splitUrl("http://example.com")
    ('http://example.com', '')
    >>> splitUrl("/foo/bar")
    ('', '/foo/bar')
    """
    scheme, separator, rest = url.partition(SCHEME_SEPARATOR)
    if not separator:
        return "", url

    domain, slash, path = rest.partition("/")
    return scheme + separator + domain, slash + path


def makeRelative(path, basePath):
    """
    İlk argüman olarak verilen url'i, ikinci argümana göre göreceli bir
    yola çevirir. İki argümanın da kökü varsa ve birbirinden farklıysa
    DomainMismatchError hatası verilir. Köklerden biri boşsa, karşılaştırma
    yapılmaz.
    ------------------------------------------------------------------------
    Turns an url into a relative path. basePath may be an url or a plain
    path. If both have a root and the roots differ, DomainMismatchError is
    raised. Roots are not compared if either of them is empty, so plain
    paths can be compared with the path part of an url.

    Relative path calculation is done by paths.makeRelative, errors raised
    there are passed on as they are.

    >>> makeRelative("http://example.com/a/b", "http://example.com/a")
    'b'
    """
    if not isinstance(path, str):
        raise InvalidInputError(
            "The path must be a string. Got: %s" % type(path).__name__)
    if not isinstance(basePath, str):
        raise InvalidInputError(
            "The base path must be a string. Got: %s" % type(basePath).__name__)

    root, relativePath = splitUrl(path)
    baseRoot, relativeBasePath = splitUrl(basePath)
    urllogger.debug("split %r into %r and %r" % (path, root, relativePath))
    urllogger.debug("split %r into %r and %r" % (basePath, baseRoot, relativeBasePath))

    relative = paths.makeRelative(relativePath, relativeBasePath)

    if root and baseRoot and root != baseRoot:
        urllogger.debug("Domain mismatch: %s != %s" % (root, baseRoot))
        raise DomainMismatchError(root, baseRoot)

    return relative
