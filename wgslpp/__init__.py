"""wgslpp toolchain.

Provides CLI for preprocessing WGSL shaders, core itself lives inside `libwgslpp`.
"""
