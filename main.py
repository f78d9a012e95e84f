'''
Orchestrator

Single responsibility: glue the documentation pipeline together.

Responsibilities:
- Parse CLI arguments and layer them over the YAML config
- Run the page generator over the data file
- Optionally write the index page
- Report failures on stderr with a non-zero exit status

This file contains no business logic.

'''
import argparse
import os
import sys

from DocGen.Config.config_loader import load_config
from DocGen.Generate.generator import generate
from DocGen.Reporting.index_writer import write_index


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Generate bug pattern documentation pages")
    p.add_argument("input", help="Tab-delimited bug pattern data file")
    p.add_argument("--config", "-c", default=None, help="YAML config file (defaults to the packaged config.yml)")
    p.add_argument("--outdir", "-o", default=None, help="Directory for generated pages")
    p.add_argument("--example-dir-base", "-e", default=None, help="Root of the example source tree")
    p.add_argument("--front-matter", action=argparse.BooleanOptionalAction, default=None, help="Emit Jekyll front matter (overrides config)")
    p.add_argument("--pygments", action=argparse.BooleanOptionalAction, default=None, help="Use {%% highlight %%} blocks instead of code fences (overrides config)")
    p.add_argument("--index", action=argparse.BooleanOptionalAction, default=None, help="Also write bugpatterns.md (overrides config)")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            output_dir=args.outdir,
            example_dir_base=args.example_dir_base,
            generate_front_matter=args.front_matter,
            use_pygments=args.pygments,
            generate_index=args.index,
        )

        patterns = generate(args.input, config)

        if config.generate_index:
            write_index(patterns, config.output_dir, config.generate_front_matter)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Generated {len(patterns)} bug pattern pages in {os.path.abspath(config.output_dir)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
