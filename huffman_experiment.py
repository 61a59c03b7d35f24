import sys

from huffcodec.codecs import HuffmanCodec
from huffcodec.logger import Logger
from huffcodec.performance_display import PerformanceDisplay

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."


def main(text=lorem_ipsum_1par, plot_folder=None):
    logger = Logger()
    logger.display_info = False
    codec = HuffmanCodec(logger=logger)

    result = codec.build(text)
    print("Frequencies:")
    for symbol, count in result.frequencies.sorted_by_count():
        print(f"  {symbol!r}: {count}")
    print("Codes:")
    for symbol, code in result.codes.sorted_by_length():
        print(f"  {symbol!r}: {code}")

    encoded = codec.encode(text)
    stats = codec.statistics()
    print(f"Size of original data: {stats.fixed_length_bits} bits")
    print(f"Size of encoded data: {len(encoded)} bits")
    print(f"Average code length: {stats.average_code_length:.4f} bits/symbol (entropy {stats.entropy:.4f})")
    print(f"Compression ratio: {stats.compression_ratio:.4f}")

    if plot_folder is not None:
        pm = PerformanceDisplay(logger.logs)
        pm.generate_frequency_code_length_plot(result, save_path=f"{plot_folder}/frequency_code_length.png")
        pm.generate_merge_frequency_plot(save_path=f"{plot_folder}/merge_frequencies.png")
        logger.save(f"{plot_folder}/huffman_experiment.log")


if __name__ == "__main__":
    if len(sys.argv) > 1:
        with open(sys.argv[1], 'r', encoding='utf-8') as f:
            main(f.read(), sys.argv[2] if len(sys.argv) > 2 else None)
    else:
        main()
