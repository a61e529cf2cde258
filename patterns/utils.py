import io
import sys
import time

from black import FileMode, format_str

from patterns.config import RenderRunInfo


def format_args_as_function_call(func_name: str, args_dict: dict) -> str:
    """
    Generate and format a string representing how to call a function with given arguments.
    """
    args_str = ", ".join(f"{key}={repr(value)}" for key, value in args_dict.items())
    function_call_str = f"{func_name}({args_str})"

    # Format using black
    mode = FileMode(line_length=80)
    formatted_str = format_str(function_call_str, mode=mode)

    return formatted_str


def capture_output(func, *args, **kwargs) -> RenderRunInfo:
    original_stdout = sys.stdout  # Save a reference to the original standard output
    new_stdout = io.StringIO()
    sys.stdout = new_stdout  # Redirect standard output to the new StringIO object

    try:
        start_time: float = time.perf_counter()
        output = func(*args, **kwargs)
        time_diff: float = time.perf_counter() - start_time
    except Exception as e:
        # Reraise all exceptions to allow for outer handling, keeping anything printed so far
        e.std_output = new_stdout.getvalue()
        raise
    finally:
        # Whatever happens, reset standard output to its original value
        sys.stdout = original_stdout

    # Output is kept verbatim: trailing delimiters are part of the pattern
    return RenderRunInfo(output, new_stdout.getvalue(), time_diff)
