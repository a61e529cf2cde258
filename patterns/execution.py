import importlib
import logging
import multiprocessing
from types import ModuleType
from typing import Dict, Optional, Tuple, List, Union, Iterable

from func_timeout import func_set_timeout

from patterns.config import VerificationResult, RenderRunInfo
from patterns.exceptions import InvalidArgumentException
from patterns.renderer.config import Config, get_config
from patterns.renderer.core import Renderer, TSize
from patterns.utils import format_args_as_function_call

logger = logging.getLogger(__name__)

# Sizes every renderer must reject without printing anything
INVALID_SIZES: Tuple[TSize, ...] = (0, -1)


def _check_invalid_sizes(
    target_module: ModuleType, renderer: Renderer, run_name: str
) -> Optional[str]:
    for size in INVALID_SIZES:
        function_call: str = format_args_as_function_call(
            func_name=renderer.function_name, args_dict={"size": size}
        )
        try:
            run_info: RenderRunInfo = renderer.run_with_size(
                size, module=target_module, function_name=renderer.function_name
            )
        except InvalidArgumentException as e:
            partial_output: str = getattr(e, "std_output", "")
            if partial_output:
                return (
                    f"Partial output printed by '{run_name}' for function call:\n"
                    f"{function_call}"
                    f"Got:\n{partial_output}\n"
                )
            continue
        except Exception as e:
            return (
                f"Wrong error raised by '{run_name}' for function call:\n"
                f"{function_call}{type(e).__name__}: {e}"
            )

        return (
            f"Invalid size accepted by '{run_name}' for function call:\n"
            f"{function_call}"
            f"Got:\n{run_info.std_output}\n"
        )

    return None


def _verify_single_renderer(
    target_module: ModuleType, renderer: Renderer
) -> VerificationResult:
    run_name: str = f"{target_module.__name__}.{renderer.function_name}"
    ref_module: ModuleType = get_config().reference_module_object

    max_time: float = renderer.max_time_seconds
    elapsed_time: float = 0
    last_valid_iteration = 0

    execution_details: List[Tuple[int, float]] = []

    error: Optional[str] = _check_invalid_sizes(target_module, renderer, run_name)
    if error is not None:
        return VerificationResult(name=run_name, result=0, error=error)

    for size in renderer.sizes():
        if elapsed_time >= max_time:
            logger.debug("%s: time budget spent before size %d", run_name, size)
            break

        function_call: str = format_args_as_function_call(
            func_name=renderer.function_name, args_dict={"size": size}
        )

        try:
            user_result: RenderRunInfo = renderer.run_with_size(
                size, module=target_module, function_name=renderer.function_name
            )
            _, user_std_output, time_diff = user_result
        except Exception as e:
            return VerificationResult(
                name=run_name,
                result=last_valid_iteration,
                error=f"Error while executing '{run_name}' for function call:\n{function_call}{e}",
                details=execution_details,
            )

        # Only count the time in the candidate renderer, exclude all time spent in validation
        elapsed_time += time_diff

        try:
            ref_result: RenderRunInfo = renderer.run_with_size(
                size, module=ref_module, function_name=renderer.reference_name
            )
            ref_std_output = ref_result.std_output
        except Exception as e:
            return VerificationResult(
                name=run_name,
                result=last_valid_iteration,
                error=f"Error while executing '{run_name}' in the reference implementation for function call:\n"
                f"{function_call}{e}",
                details=execution_details,
            )

        if user_std_output != ref_std_output:
            return VerificationResult(
                name=run_name,
                result=last_valid_iteration,
                error=(
                    f"Mismatch in print-statement output for '{run_name}' "
                    f"for function call:\n{function_call}"
                    f"Expected:\n{ref_std_output}\n"
                    f"Got:\n{user_std_output}\n"
                ),
                details=execution_details,
            )

        logger.debug("%s: size %d matches reference (%.6fs)", run_name, size, time_diff)
        execution_details.append((size, time_diff))
        last_valid_iteration += 1

    return VerificationResult(
        name=run_name, result=last_valid_iteration, details=execution_details
    )


def verify_renderer(
    renderer: Renderer, target_module: Union[str, ModuleType, None] = None
) -> VerificationResult:
    """
    Compare a renderer's printed output against its reference for every configured size.

    :param renderer: Renderer to verify
    :param target_module: (Optional) Module holding the candidate function, defaults to the
        renderer's own module
    :return: VerificationResult with the number of sizes that matched
    """
    if target_module is None:
        target_module = renderer.module

    try:
        if isinstance(target_module, str):
            target_module = importlib.import_module(target_module)
    except ImportError:
        return VerificationResult(
            name=str(target_module),
            error=f"Error: Target module '{target_module}' not found.",
        )

    return _verify_single_renderer(target_module=target_module, renderer=renderer)


@func_set_timeout(60)
def verify_renderers(renderers: List[Renderer]) -> List[VerificationResult]:
    """
    Verification of each renderer in a separate process.
    We cannot allow unbound unlimited execution and must hard-terminate long-lived calls.

    :raises FunctionTimedOut: on timeout (i.e. excessively long execution)
    """
    task_arguments: List[Tuple[Renderer, str]] = [
        (renderer, renderer.module) for renderer in renderers
    ]

    processes: int = max(1, min(len(renderers), multiprocessing.cpu_count()))
    with multiprocessing.Pool(processes=processes) as pool:
        verification_results: List[VerificationResult] = pool.starmap(
            verify_renderer, task_arguments
        )

    return verification_results


def run_verification_given_config(
    pattern_config: Config, names: Optional[Iterable[str]] = None
) -> bool:
    print("STARTING VERIFICATION")
    print("\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~")

    renderers: List[Renderer] = pattern_config.get_renderers(names)
    verification_results: List[VerificationResult] = verify_renderers(renderers)

    errors: Dict[str, str] = {}
    for renderer, verification_result in zip(renderers, verification_results):
        print(">>> " + renderer.name)
        print(
            f"[{verification_result.name}]: {verification_result.result} sizes match the reference"
            + (
                f" (up to n = {verification_result.largest_size})"
                if verification_result.largest_size is not None
                else ""
            )
        )

        if verification_result.has_error:
            errors[verification_result.name] = verification_result.error

    if errors:
        print("\n❌ Verification Errors:")
        for name, error_str in errors.items():
            print(f"\n[{name}]: {error_str}")

    print("\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~")
    print("\nVERIFICATION COMPLETE")

    return not errors
