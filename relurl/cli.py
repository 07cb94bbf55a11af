# -*- coding: utf-8 -*-
"""
Komut satırından kullanım.

    relurl [--debug] URL BASE

Argümanlar verilmezse, kullanıcıdan istenir.
-----------------------------------------------------------------------
Command line usage. Missing arguments are asked from the user.
"""
import sys
import logging

from .urls import makeRelative, DomainMismatchError
from .paths import PathError

LOG_FILE = "relurl.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

main_logger = logging.getLogger("relurl")


def configureLogging(debug=False):
    """
    Uyarıları ekrana yazar. debug True ise her şeyi LOG_FILE dosyasına da
    kaydeder.
    ------------------------------------------------------------------------
    Sends warnings to stderr. If debug is True, everything is also written
    to LOG_FILE.
    """
    for handler in list(main_logger.handlers):
        main_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(logging.WARNING)
    ch.setFormatter(formatter)
    main_logger.addHandler(ch)

    if debug:
        fh = logging.FileHandler(LOG_FILE)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        main_logger.addHandler(fh)
        main_logger.setLevel(logging.DEBUG)
    else:
        main_logger.setLevel(logging.WARNING)


def _argument(args, index, prompt):
    try:
        return args[index]
    except IndexError:
        return input(prompt)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    debug = "--debug" in argv
    args = [a for a in argv if a != "--debug"]
    configureLogging(debug)

    try:
        url = _argument(args, 0, "Please enter the url: ")
        base = _argument(args, 1, "Please enter the base url: ")
    except EOFError:
        sys.stderr.write("Error: url and base url are required\n")
        return 1

    try:
        result = makeRelative(url, base)
    except (DomainMismatchError, PathError) as err:
        sys.stderr.write("Error: %s\n" % err)
        return 1

    print(result)
    return 0
