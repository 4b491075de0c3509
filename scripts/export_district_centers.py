#!/usr/bin/env python3
"""CLI script to export the centers of a district to CSV."""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from center_locator.core.center_service import CenterApiError, CenterService
from center_locator.core.config import API_URL, LOG_LEVEL
from center_locator.core.models import EXPORT_COLUMNS
from center_locator.core.progress import format_name
from center_locator.utils.logging import setup_logging


def list_level(service: CenterService, country: Optional[str], state: Optional[str]) -> List[str]:
    """Lines describing the level below the given country/state."""
    if not country:
        return [f"{format_name(c.country)}\t{c.count}" for c in service.list_countries()]
    if not state:
        return [f"{format_name(s.state)}\t{s.total_centers}" for s in service.list_states(country)]
    return [f"{format_name(d.district)}\t{d.total_centers}" for d in service.list_districts(country, state)]


def main(argv=None, service: Optional[CenterService] = None) -> int:
    parser = argparse.ArgumentParser(description="Export the centers of a district to CSV")
    parser.add_argument("--country", help="Country name as used by the API")
    parser.add_argument("--state", help="State name as used by the API")
    parser.add_argument("--district", help="District name as used by the API")
    parser.add_argument("--output", type=Path, help="CSV file to write (default: stdout)")
    parser.add_argument("--list", action="store_true",
                       help="List the level below the given country/state instead of exporting")
    parser.add_argument("--api-url", default=API_URL, help="Centers API root")
    
    args = parser.parse_args(argv)
    setup_logging(LOG_LEVEL)
    service = service or CenterService(base_url=args.api_url)
    
    try:
        if args.list:
            for line in list_level(service, args.country, args.state):
                print(line)
            return 0
        
        if not (args.country and args.state and args.district):
            print("Error: --country, --state and --district are required for export", file=sys.stderr)
            return 2
        
        centers = service.list_centers_in_district(args.country, args.state, args.district)
    except CenterApiError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    
    df = pd.DataFrame([center.to_dict() for center in centers], columns=EXPORT_COLUMNS)
    if args.output:
        df.to_csv(args.output, index=False)
        print(f"✅ Exported {len(df)} centers to {args.output}")
    else:
        df.to_csv(sys.stdout, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
