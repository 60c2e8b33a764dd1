#!/usr/bin/env python3
"""Command-line interface for serving a customer record file."""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from ..system import LoadError, ServiceResult, ServiceSystem

logger = logging.getLogger(__name__)

PROMPT = "enter input file name"
LOAD_FAILED = "file open failed"


def read_input_path(stream=None) -> Optional[str]:
    """Prompt for an input path and read the first token from ``stream``."""
    stream = stream if stream is not None else sys.stdin
    print(PROMPT)
    for line in stream:
        tokens = line.split()
        if tokens:
            return tokens[0]
    return None


def print_service_order(system: ServiceSystem) -> ServiceResult:
    """Serve every customer, printing each line as it is served."""
    print("serve order")
    for event in system.serve():
        print(event.format())
    result = system.serve_all()
    print()
    print(f"total time {result.total_duration}")
    return result


def print_metrics(metrics: Dict) -> None:
    """Print the metrics summary to console."""
    print("\n=== Service Metrics ===")
    print(f"Rounds: {metrics['system']['rounds']}")
    print(f"Customers Served: {metrics['system']['customers_served']}")

    print("\nClass Metrics:")
    for class_name, class_metrics in metrics['classes'].items():
        print(f"  {class_name}:")
        for metric, value in class_metrics.items():
            if isinstance(value, float):
                print(f"    {metric}: {value:.4f}")
            else:
                print(f"    {metric}: {value}")


def save_results(result: ServiceResult, metrics: Dict, output_path: str) -> None:
    """Save results to JSON file."""
    results = {
        'events': [e.to_dict() for e in result.events],
        'total_duration': result.total_duration,
        'metrics': metrics
    }
    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(format='%(levelname)s:%(message)s',
                        level=logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[List[str]] = None):
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description='Serve waiting and missed customers from a record file')

    parser.add_argument('input', nargs='?',
                        help='Record file; prompted for on stdin when omitted')

    # Output options
    parser.add_argument('-o', '--output', type=str,
                        help='Output file for results (JSON)')
    parser.add_argument('-p', '--plot', action='store_true',
                        help='Show plots')
    parser.add_argument('--plot-file', type=str,
                        help='Save the service order plot to file')
    parser.add_argument('-d', '--detailed', action='store_true',
                        help='Show detailed metrics')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log discarded records and load details')

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    path = args.input
    if path is None:
        path = read_input_path()
        if path is None:
            return

    system = ServiceSystem()
    try:
        report = system.load(path)
    except LoadError as err:
        logger.debug("load failed: %s", err)
        print(LOAD_FAILED)
        return

    logger.info("%d records loaded, %d discarded", report.accepted, report.discarded)

    result = print_service_order(system)
    metrics = system.get_metrics_summary()

    if args.detailed:
        print_metrics(metrics)

    if args.output:
        save_results(result, metrics, args.output)
        print(f"\nResults saved to: {args.output}")

    # Generate plots
    if args.plot or args.plot_file:
        from ..visualization.plotting import plot_service_order, plot_class_summary

        fig = plot_service_order(result)

        if args.plot_file:
            fig.savefig(args.plot_file, dpi=300, bbox_inches='tight')
            print(f"Plot saved to: {args.plot_file}")

        if args.plot:
            plot_class_summary(metrics)
            import matplotlib.pyplot as plt
            plt.show()

    system.reset()


if __name__ == '__main__':
    main()
