def counter_class_source(*, include_superclass: bool = False) -> str:
    maybe_superclass = " < Base" if include_superclass else ""

    return f"""
    class Counter{maybe_superclass} {{
        init(start) {{
            this.count = start;
        }}

        increment() {{
            this.count = this.count + 1;
            return this.count;
        }}
    }}
    """


def countdown_loop_source() -> str:
    return """
    for (var i = 3; i > 0; i = i - 1) {
        print i;
    }
    """
