import argparse
import logging as log
import sys
from typing import Iterable, List

from BackingStore import BackingStore, BACKING_STORE_FILE_NAME
from PhysicalMemory import NUM_FRAMES, NUMBER_OF_PAGES, MAX_VIRTUAL_ADDRESS
from ReplacementPolicy import Policy
from SimulatorError import SimulatorError, InvalidAddress
from Translator import Translator, TranslationResult, Statistics

OUTPUT_LINE = "Virtual address: {} TLB: {} Physical address: {} Value: {}"


def parse_address(line: str, line_number: int = None, path: str = None) -> int:
    """turns one line of the address file into a logical address; raises InvalidAddress for anything that is not a
    base 10 integer in 0..65535"""
    text = line.strip()
    if not text.isdigit() or not text.isascii():
        raise InvalidAddress(text, line_number, path)
    address = int(text)
    if address > MAX_VIRTUAL_ADDRESS:
        raise InvalidAddress(text, line_number, path)
    return address


def read_addresses(path: str) -> List[int]:
    addresses = []
    with open(path, 'rb') as address_file:
        for line_number, raw_line in enumerate(address_file, 1):
            try:
                line = raw_line.decode('ascii')
            except UnicodeDecodeError:
                raise InvalidAddress(raw_line.strip().decode('ascii', 'backslashreplace'), line_number, path) from None
            if not line.strip():
                continue
            addresses.append(parse_address(line, line_number, path))
    log.info(f"read {len(addresses)} addresses from {path}")
    return addresses


def format_result(result: TranslationResult) -> str:
    return OUTPUT_LINE.format(result.virtual_address, result.tlb_slot, result.physical_address, result.value)


def format_summary(stats: Statistics) -> List[str]:
    """raises EmptyInput when nothing was translated"""
    return [
        f"Number of Translated Addresses = {stats.total}",
        f"Page Faults = {stats.page_faults}",
        f"Page Fault Rate = {stats.page_fault_rate:.3f}",
        f"TLB Hits = {stats.tlb_hits}",
        f"TLB Hit Rate = {stats.tlb_hit_rate:.3f}",
    ]


def run(addresses: Iterable[int], backing_store_path: str = BACKING_STORE_FILE_NAME, policy=Policy.FIFO,
        num_frames: int = NUM_FRAMES, strict_tlb: bool = False) -> List[str]:
    """translates every address and returns the complete output, result lines followed by the summary"""
    with BackingStore(backing_store_path) as backing_store:
        translator = Translator(backing_store, policy, num_frames, strict_tlb=strict_tlb)
        output = [format_result(result) for result in translator.translate_all(addresses)]
    log.info(f"{translator.memory.occupied_frames()} of {translator.memory.num_frames} frames occupied, "
             f"{translator.page_table.resident_pages()} pages resident")
    output.extend(format_summary(translator.statistics))
    return output


def check_frames(frames: str) -> int:
    try:
        frames = int(frames)
    except ValueError:
        raise argparse.ArgumentTypeError(f"number of frames must be an integer, got {frames!r}")
    if frames > NUMBER_OF_PAGES or frames <= 0:
        raise argparse.ArgumentTypeError(f"number of frames must be between 1 and {NUMBER_OF_PAGES}, got {frames}")
    return frames


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vmm', description='Translate logical addresses through a simulated TLB, page table and backing store')
    parser.add_argument("addresses", help="file with one logical address (0..65535) per line")
    parser.add_argument("-b", "--backing-store", default=BACKING_STORE_FILE_NAME,
                        help=f"backing store file (default: {BACKING_STORE_FILE_NAME})")
    parser.add_argument("-o", "--output", help="write results to this file instead of stdout")
    parser.add_argument("-p", "--policy", default=Policy.FIFO.value,
                        help="page replacement policy: fifo or lru (default: fifo)")
    parser.add_argument("-f", "--frames", type=check_frames, default=NUM_FRAMES,
                        help=f"number of physical frames (default: {NUM_FRAMES})")
    parser.add_argument("--strict-tlb", action="store_true",
                        help="drop the TLB entry of a page when its frame is given to another page")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging; repeat for debug output")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log.basicConfig(level=[log.WARNING, log.INFO, log.DEBUG][min(args.verbose, 2)],
                    format="%(levelname)s: %(message)s")

    try:
        policy = Policy.parse(args.policy)
        try:
            addresses = read_addresses(args.addresses)
        except OSError as e:
            log.error(f"could not read address file {args.addresses}: {e.strerror or e}")
            return 1
        log.info(f"policy={policy.value} frames={args.frames} backing_store={args.backing_store} "
                 f"strict_tlb={args.strict_tlb}")
        output = run(addresses, args.backing_store, policy, args.frames, args.strict_tlb)
    except SimulatorError as e:
        log.error(e)
        return 1

    if args.output:
        try:
            with open(args.output, 'w') as output_file:
                output_file.write('\n'.join(output) + '\n')
        except OSError as e:
            log.error(f"could not write output file {args.output}: {e.strerror or e}")
            return 1
    else:
        print('\n'.join(output))
    return 0


if __name__ == '__main__':
    sys.exit(main())
