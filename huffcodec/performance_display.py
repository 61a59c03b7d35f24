import matplotlib.pyplot as plt
import numpy as np

from .logger import MergeLog


class PerformanceDisplay:
    def __init__(self, logs=None,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.6,
                 line_color='red', line_linewidth=2):
        self.logs = logs if logs is not None else []
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.line_color = line_color
        self.line_linewidth = line_linewidth

    def _finish(self, title, xlabel, ylabel, show_graph=False, save_path=None):
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()

    def generate_frequency_code_length_plot(self, build_result, show_graph=False, save_path=None):
        """
        Plots symbol frequencies as bars, most frequent first, with the code
        length of each symbol on a second axis.
        """
        entries = build_result.frequencies.sorted_by_count()
        if not entries:
            print("No data available for Frequency and Code Length.")
            return False

        labels = [repr(entry.symbol) for entry in entries]
        counts = np.array([entry.frequency for entry in entries])
        lengths = np.array([len(build_result.codes[entry.symbol]) for entry in entries])
        x = np.arange(len(entries))

        fig, ax = plt.subplots(figsize=self.fig_size, dpi=self.dpi)
        ax.bar(x, counts, color=self.bar_color, alpha=self.bar_alpha, label="Frequency")
        ax.set_xticks(x)
        ax.set_xticklabels(labels, fontsize=self.font_size - 2)
        length_ax = ax.twinx()
        length_ax.plot(x, lengths, color=self.line_color, linewidth=self.line_linewidth,
                       marker='o', label="Code length")
        length_ax.set_ylabel("Code length (bits)", fontsize=self.font_size)
        fig.legend(fontsize=self.font_size)
        ax.grid(True)
        ax.set_title("Symbol Frequency and Code Length", fontsize=self.font_size + 2)
        ax.set_xlabel("Symbol", fontsize=self.font_size)
        ax.set_ylabel("Frequency", fontsize=self.font_size)
        fig.tight_layout()

        if save_path:
            fig.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close(fig)
        return True

    def generate_merge_frequency_plot(self, show_graph=False, save_path=None):
        values = [log.frequency for log in self.logs if isinstance(log, MergeLog)]
        if not values:
            print("No data available for Merge Frequency.")
            return False

        x = np.arange(1, len(values) + 1)
        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.plot(x, np.array(values), color=self.line_color, linewidth=self.line_linewidth,
                 marker='o', label="Merged node frequency")
        self._finish("Huffman Merge Frequencies", "Merge Order", "Frequency", show_graph, save_path)
        return True
