"""Core compilation algorithms for plottext.

This module contains the core algorithms for:

- Layout (line splitting, pen origins, advance and spacing)
- Curve flattening (fixed-step Bezier sampling in output space)
- Toolpath sequencing (pen-up/pen-down state machine)
- G-code emission (header, body, footer)

All services are designed to be:
- Deterministic (identical input gives identical output)
- Free of shared mutable state between compilations

Key functions:
- layout: Place characters at pen origins
- flatten: Convert a curve segment to line points
- validate_request: Reject unusable requests
- compile_text: Synchronous end-to-end compilation

Key classes:
- ToolpathSequencer: Emits travel/draw/lift/lower commands
- GcodeEmitter: Formats commands as G-code
- TextCompiler: Orchestrates the pipeline
- MessageTemplate: Fills card templates with recipient fields
"""

from plottext.core.compiler import TextCompiler, compile_text, validate_request
from plottext.core.emitter import GcodeEmitter
from plottext.core.flatten import cubic_point, flatten, quadratic_point
from plottext.core.layout import iter_lines, layout
from plottext.core.sequencer import PenState, ToolpathSequencer
from plottext.core.templates import BUILTIN_TEMPLATES, MessageTemplate, get_template

__all__ = [
    "BUILTIN_TEMPLATES",
    # Emission
    "GcodeEmitter",
    # Templates
    "MessageTemplate",
    # Sequencing
    "PenState",
    # Compiler
    "TextCompiler",
    "ToolpathSequencer",
    "compile_text",
    # Flattening
    "cubic_point",
    "flatten",
    "get_template",
    # Layout
    "iter_lines",
    "layout",
    "quadratic_point",
    "validate_request",
]
