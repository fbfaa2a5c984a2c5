#!/usr/bin/env python3
"""
RDN Transit System bus agency tools.

Usage:
    python rdn_agency_tools.py [input/gtfs.zip] [output/] [files-prefix] [--good-enough]
"""
import sys
import traceback

from rdn_transit.agency.rdn import RdnTransitAgencyTools
from rdn_transit.errors import AgencyToolsError
from rdn_transit.logger import get_logger

logger = get_logger("rdn_agency_tools")


def main(argv=None):
    """Main function for the RDN agency tools."""
    try:
        result = RdnTransitAgencyTools().start(sys.argv[1:] if argv is None else argv)
        if result is None:
            logger.info("Download was skipped (feed not modified). Exiting.")
            return
        logger.info(f"  - {result['routes']} routes")
        logger.info(f"  - {result['trips']} trip directions")
        logger.info(f"  - {result['stops']} stops")
    except AgencyToolsError as e:
        logger.error(f"Agency tables are out of date: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Agency tools failed: {e}")
        logger.debug(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
