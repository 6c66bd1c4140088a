"""Command-line interface for sf-cli."""

from __future__ import annotations

from sfcli.cli.app import main as main
from sfcli.cli.commands import init as init_command
from sfcli.cli.output import RichInitReporter as RichInitReporter
from sfcli.cli.parser import build_parser as build_parser
from sfcli.cli.prompts import DefaultsPrompter as DefaultsPrompter
from sfcli.cli.prompts import QuestionaryPrompter as QuestionaryPrompter
from sfcli.contracts import ConfigError as ConfigError
from sfcli.contracts import InvalidPathError as InvalidPathError
from sfcli.contracts import ScaffoldRequest as ScaffoldRequest
from sfcli.git import get_git_config as get_git_config
from sfcli.git import inspect_git_remote as inspect_git_remote
from sfcli.pipeline import InitPipeline as InitPipeline

_run_init = init_command.run_init
