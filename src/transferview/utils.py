import inspect
import sys

from datetime import datetime, timezone


class Logger:

    log_line_number = 1
    stream = None

    include = [
        '*',
    ]
    exclude = [
    ]

    @classmethod
    def init(cls, view_id, stream=None):
        cls.view_id = view_id
        cls.stream = stream

    @classmethod
    def log(cls, *args, important=False):
        frame = inspect.stack()[1]
        func = frame.function
        module = getattr(inspect.getmodule(frame[0]), '__name__', '').split('.')[-1]
        condition = cls.include and (func not in cls.exclude) and (('*' in cls.include) or (func in cls.include))

        if condition or important:
            print(
                getattr(cls, 'view_id', ''),
                cls.log_line_number,
                datetime.now(timezone.utc).strftime('%m/%d %H:%M:%S.%f')[:-3],
                module.ljust(15),
                func.ljust(25),
                *args,
                file=cls.stream or sys.stdout,
                flush=True
            )
            cls.log_line_number += 1
