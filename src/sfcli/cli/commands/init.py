"""Init command handler."""

from __future__ import annotations

import argparse


def run_init(args: argparse.Namespace) -> int:
    """Scaffold an SFRootRepo at ``args.path``."""
    import sfcli.cli as cli

    reporter = cli.RichInitReporter()
    prompter = cli.DefaultsPrompter() if args.defaults else cli.QuestionaryPrompter()

    try:
        request = cli.ScaffoldRequest(
            path=args.path,
            explicit_site_root=args.site_root,
            explicit_output_dir=args.output,
            explicit_src_dir=args.src,
            debug=args.debug,
        )
        pipeline = cli.InitPipeline(
            prompter=prompter,
            reporter=reporter,
            inspect_remote=cli.inspect_git_remote,
            read_git_config=cli.get_git_config,
        )
        pipeline.run(request)
        return 0
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2
    except cli.InvalidPathError as exc:
        reporter.error(str(exc))
        return 1
    except cli.ConfigError as exc:
        reporter.error(str(exc))
        return 3
    except OSError as exc:
        reporter.error(f"failed to write scaffold: {exc}")
        return 1


__all__ = ["run_init"]
