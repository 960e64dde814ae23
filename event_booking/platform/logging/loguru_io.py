"""
`@Logger.io` - call tracing for use cases, repositories and controllers.

At DEBUG, each decorated call logs its arguments and return value with
sensitive keys masked. An exception is logged by the innermost decorated
frame only: `CustomBaseError` as a plain error line, anything else with its
traceback. `Logger.base` is the bound loguru logger for everything else.
"""

from functools import wraps
from inspect import iscoroutinefunction
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from event_booking.platform.config.core_setting import settings
from event_booking.platform.exception.exceptions import CustomBaseError
from event_booking.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from event_booking.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_LOGGED_FLAG = '_has_logged'


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}
        self.depth = 2

    def _emit(self, level: str, message: str, *, extra_depth: int = 0) -> None:
        self._custom_logger.bind(**self.extra).opt(depth=self.depth + extra_depth).log(
            level, message
        )

    def on_enter(self, *args: Any, **kwargs: Any) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._emit(
                'DEBUG', f'args: {self.redact(args)}, kwargs: {self.redact(kwargs)}', extra_depth=1
            )

    def on_return(self, return_value: Any) -> None:
        if settings.DEBUG:
            self._emit('DEBUG', f'return: {self.redact(return_value)}', extra_depth=1)

    def on_error(self, e: Exception) -> None:
        if getattr(e, _LOGGED_FLAG, False):
            return
        setattr(e, _LOGGED_FLAG, True)

        bound = self._custom_logger.bind(**self.extra)
        if isinstance(e, CustomBaseError):
            bound.opt(depth=self.depth + 1).error(f'{type(e).__name__}: {e.message}')
        else:
            bound.opt(depth=self.depth + 1, exception=e).error(f'{type(e).__name__}: {e}')

    def redact(self, data: Any) -> Any:
        if isinstance(data, dict):
            result: Any = {
                key: self.redact(should_mask_keyword(key, value)) for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            result = type(data)(self.redact(item) for item in data)
        else:
            result = mask_sensitive(data)
        return truncate_content(result) if self.truncate_content else result

    def _attribute_to_logger(self, wrapper: Callable[..., Any]) -> Callable[..., Any]:
        # loguru skips frames whose filename is its own when resolving `depth`
        logger_file = cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        code = wrapper.__code__  # type: ignore[attr-defined]
        wrapper.__code__ = code.replace(co_filename=logger_file)  # type: ignore[attr-defined]
        return wrapper

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                self.on_enter(*args, **kwargs)
                try:
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    return_value = await func(*args, **kwargs)
                except Exception as e:
                    self.on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()
                self.on_return(return_value)
                return return_value

            return cast(_F, self._attribute_to_logger(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            self.on_enter(*args, **kwargs)
            try:
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*args, **kwargs)
            except Exception as e:
                self.on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()
            self.on_return(return_value)
            return return_value

        return cast(_F, self._attribute_to_logger(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
