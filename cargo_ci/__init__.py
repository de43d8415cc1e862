"""
Cargo Matrix CI Driver.
Runs `cargo check` for one target triple, plus debug and release test passes
on the reference platform.
"""
