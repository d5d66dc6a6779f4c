from datetime import timedelta

MICROSECOND = timedelta(microseconds=1)
CENTISECOND = timedelta(milliseconds=10)
DECISECOND = timedelta(milliseconds=100)

def roundTo(duration: timedelta, unit: timedelta) -> int:
    '''
    Number of `unit`s in `duration`, rounding half up.  
    Integer microseconds, so `timedelta.max` cannot overflow.  
    '''
    us = duration // MICROSECOND
    unit_us = unit // MICROSECOND
    return (us + unit_us // 2) // unit_us

def format_duration(duration: timedelta) -> str:
    '''
    `12.34s`, `3m 07.50s`, or `1h 02m 03.4s`.  
    The branch is picked after rounding, so `59.999s` is `1m 00.00s`.  
    '''
    if duration < timedelta(0):
        raise ValueError(f'Negative duration: {duration}')
    cs = roundTo(duration, CENTISECOND)
    if cs < 60 * 100:
        return f'{cs // 100}.{cs % 100:02d}s'
    if cs < 3600 * 100:
        minutes, cs = divmod(cs, 60 * 100)
        return f'{minutes}m {cs // 100:02d}.{cs % 100:02d}s'
    ds = roundTo(duration, DECISECOND)
    hours, ds = divmod(ds, 3600 * 10)
    minutes, ds = divmod(ds, 60 * 10)
    return f'{hours}h {minutes:02d}m {ds // 10:02d}.{ds % 10}s'

def timer_color(elapsed: timedelta) -> str:
    seconds = int(elapsed.total_seconds())
    if seconds < 10:
        return 'green'
    if seconds < 60:
        return 'yellow'
    if seconds < 300:
        return 'cyan'
    return 'magenta'
