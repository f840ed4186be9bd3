# mtstream/cli.py
import argparse
import logging
from pathlib import Path
import json
import sys
from typing import Any, Dict, List, Optional

from .errors import DataReadError
from .objects.base import to_json_value
from .reader import SerializationProperties, SystemType
from .utils.logging import setup_logging
from .walker import StreamRecord, StreamWalker

logger = logging.getLogger(__name__)

PLATFORMS = {
    'auto': None,
    'mac': SystemType.MAC,
    'win': SystemType.WINDOWS,
}


def record_to_dict(record: StreamRecord, system_type: Optional[SystemType]) -> Dict[str, Any]:
    """Flatten a decoded record for JSON output.

    Args:
        record: Record yielded by the walker
        system_type: Platform used to render stored names

    Returns:
        Dictionary with the record header followed by its fields
    """
    result = {
        'offset': record.offset,
        'tag': record.tag,
        'revision': record.revision,
        'type': record.obj.type.name,
    }
    result.update(to_json_value(record.obj, system_type))
    return result


def dump_stream(path: Path, platform: str = 'auto') -> List[Dict[str, Any]]:
    """Decode every record of a stream file.

    Raises:
        DataReadError: If a record fails to decode
        OSError: If the file cannot be read
    """
    system_type = PLATFORMS[platform]
    properties = SerializationProperties.for_system(system_type) if system_type else None

    records = []
    with open(path, 'rb') as f:
        walker = StreamWalker(f, properties)
        for record in walker:
            records.append(record_to_dict(record, walker.properties.system_type))
    logger.info(f"Decoded {len(records)} records from {path}")
    return records


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Decode a project data stream and dump its records as JSON'
    )
    parser.add_argument('stream',
                        help='Path to an extracted data stream')
    parser.add_argument('--platform',
                        choices=sorted(PLATFORMS),
                        default='auto',
                        help='Authoring platform (default: detect from the stream header)')
    parser.add_argument('--output', '-o',
                        help='Write JSON to this file instead of stdout')
    parser.add_argument('--log-dir',
                        help='Also write a timestamped log file to this directory')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    stream_path = Path(args.stream)
    if not stream_path.is_file():
        logger.error(f"Stream not found: {stream_path}")
        return 1

    try:
        records = dump_stream(stream_path, args.platform)
        text = json.dumps(records, indent=2)
        if args.output:
            output_path = Path(args.output)
            output_path.write_text(text, encoding='utf-8')
            logger.info(f"Results written to {output_path}")
        else:
            sys.stdout.write(text + '\n')
    except (DataReadError, OSError) as e:
        logger.error(f"Processing failed: {e}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.exception("Detailed error:")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
