from typing import Callable

import parsy
from parsy import Parser, regex, string


def make_direct_parser(fn: Callable[[str, int], parsy.Result]) -> Parser:
    """
    Make typed parser (required for mypy).
    """
    return Parser(fn)


# only these characters are stripped around a size specification
surrounding_whitespace = " \t\r\n"

# region direct parser (not including whitespace)

# ASCII digits only: str.isdigit() would also accept other unicode digits
digits_dp = regex(r"[0-9]+")
half_dp = string(".5").result(True)
zero_fraction_dp = string(".0").result(False)
fraction_dp = half_dp | zero_fraction_dp
# a single space is allowed between number and unit, not a tab and not two spaces
delimiter_dp = string(" ").optional()
rest_dp = parsy.any_char.many().concat()


@make_direct_parser
def alpha_dp(stream: str, index: int) -> parsy.Result:
    """
    Succeeds without consuming input, if the next character is alphabetic.
    """
    if index < len(stream) and stream[index].isalpha():
        return parsy.Result.success(index, stream[index])
    else:
        return parsy.Result.failure(index, "alphabetic character")


unit_label_dp = alpha_dp >> rest_dp

# endregion
