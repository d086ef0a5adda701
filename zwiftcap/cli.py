import argparse
import json
import sys

from zwiftcap.capture import CaptureOpenError, ZwiftCapture
from zwiftcap.config import CaptureSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print rider telemetry decoded from captured game traffic as JSON lines.")
    parser.add_argument("--file", type=str, default=None, help="Read a recorded pcap/pcapng file instead of capturing live.")
    parser.add_argument("--iface", type=str, default=None, help="Network interface for live capture.")
    parser.add_argument("--port", type=int, default=None, help="Telemetry UDP port of the game server.")
    parser.add_argument("--limit", type=int, default=None, help="Stop after this many records.")
    return parser


def open_capture(args: argparse.Namespace) -> ZwiftCapture:
    settings = CaptureSettings()
    if args.port is not None:
        settings = settings.model_copy(update={"server_port": args.port})
    if args.file:
        return ZwiftCapture.from_file(args.file, settings=settings)
    return ZwiftCapture.live(interface=args.iface, settings=settings)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        capture = open_capture(args)
    except CaptureOpenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    written = 0
    with capture:
        for rider in capture.riders():
            print(json.dumps(rider.as_dict()), flush=True)
            written += 1
            if args.limit is not None and written >= args.limit:
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())
