def find_dependency(context, locator, *args, **kwargs):
    """
    Works like the locator's find_package, but forwards the required flag of
    the package being detected and always searches quietly.

    `args` are passed through unchanged (dependency name, version...). Errors
    raised by the locator propagate to the caller.
    """
    kwargs["quiet"] = True
    kwargs["required"] = bool(context.required)
    return locator(*args, **kwargs)
