from typing import Any, List, Sequence


def to_list(sequence: Sequence[Any]) -> List[Any]:
    """ Plain python values from lists, numpy arrays or torch tensors, so that node data renders as `3` and not `tensor(3)`. """
    if hasattr(sequence, "tolist"):
        return sequence.tolist()
    return list(sequence)


def split_lines(text: str) -> List[str]:
    """
    Splits text at every newline. A trailing carriage return is dropped from each line.

    Always returns at least one line, so
    >>> split_lines("")
    ['']
    >>> split_lines("a\\n")
    ['a', '']
    """
    return [
        line[:-1] if line.endswith('\r') else line
        for line in text.split('\n')
    ]
