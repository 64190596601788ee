"""Objects shared by every CLI command through ``click``'s context."""

from __future__ import annotations

from dataclasses import dataclass

import click

from provenance.application.registry import ProvenanceRegistry
from provenance.infrastructure.clock import Clock


@dataclass
class CliState:
    registry: ProvenanceRegistry
    clock: Clock


pass_state = click.make_pass_decorator(CliState)
