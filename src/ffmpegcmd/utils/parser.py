import re

__all__ = ["compose", "quote", "FLAG"]

FLAG = None

_re_flag = re.compile(r"-[\w:.,+=@%/-]*")


def quote(arg: str) -> str:
    """Quote a command argument unless it is an option flag

    :param arg: command argument
    :return: the argument as is if it is a dash followed by word characters
             and ``:.,+=@%/-`` only, otherwise double-quoted with ``\\``,
             ``"``, ``$`` and backtick escaped

    The quoted argument is taken literally by a POSIX shell.
    """
    if _re_flag.fullmatch(arg):
        return arg
    escaped = re.sub(r'(["\\$`])', r"\\\1", arg)
    return f'"{escaped}"'


def compose(args, command=None) -> str:
    """compose command string from a list of command arguments

    :param args: command arguments (without the command)
    :type args: seq of str
    :param command: command name placed first without quotes, defaults to None
    :type command: str, optional
    :returns: command string with every non-flag argument double-quoted
    :rtype: str

    >>> compose(["-y", "-r", "23.976", "-f", "lavfi"], "ffmpeg")
    'ffmpeg -y -r "23.976" -f "lavfi"'
    """
    tokens = [quote(str(arg)) for arg in args]
    if command:
        tokens.insert(0, str(command))
    return " ".join(tokens)
