import sys

import matplotlib.pyplot as plt

from backing_store import BackingStore
from simulator import VirtualMemorySimulator, read_addresses

algorithms = ['FIFO', 'LRU']
metrics = ['page_faults', 'page_fault_rate', 'tlb_hit_rate']
titles = ['Page Faults', 'Page Fault Rate', 'TLB Hit Rate']


def collect_results(backing_store, data_files):
    results = {}
    for data_file in data_files:
        results[data_file] = {}
        for algorithm in algorithms:
            simulator = VirtualMemorySimulator(backing_store, algorithm=algorithm)
            for _ in simulator.run(read_addresses(data_file)):
                pass
            stats = simulator.stats
            results[data_file][algorithm] = {
                'page_faults': stats.page_faults,
                'page_fault_rate': stats.page_fault_rate,
                'tlb_hit_rate': stats.tlb_hit_rate
            }
    return results


def plot_results(results):
    data_files = list(results)
    fig, axes = plt.subplots(1, len(metrics), figsize=(15, 5))
    fig.suptitle('Page Replacement Policy Comparison', fontsize=14, fontweight='bold')

    width = 0.8 / max(len(data_files), 1)
    x = range(len(algorithms))
    legend_handles = []

    for idx, (metric, title) in enumerate(zip(metrics, titles)):
        ax = axes[idx]
        for file_idx, data_file in enumerate(data_files):
            values = [results[data_file][alg][metric] for alg in algorithms]
            shift = (file_idx - (len(data_files) - 1) / 2) * width
            bars = ax.bar([i + shift for i in x], values, width, label=data_file)
            if idx == 0:
                legend_handles.append(bars[0])

            for bar in bars:
                height = bar.get_height()
                label = f'{int(height)}' if metric == 'page_faults' else f'{height:.3f}'
                ax.text(bar.get_x() + bar.get_width()/2., height,
                        label, ha='center', va='bottom', fontsize=9)

        ax.set_title(title)
        ax.set_xticks(list(x))
        ax.set_xticklabels(algorithms)
        ax.grid(axis='y', alpha=0.3)

    fig.legend(legend_handles, data_files, loc='lower center',
               ncol=len(data_files), frameon=True)

    plt.tight_layout()
    plt.subplots_adjust(bottom=0.15)
    return fig


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 2:
        print("Usage: generate_graphs.py BACKING_STORE INPUT [INPUT ...]")
        return 1

    print("Running simulations...")
    backing_store = BackingStore.from_file(argv[0])
    results = collect_results(backing_store, argv[1:])
    fig = plot_results(results)
    fig.savefig('policy_comparison.png', dpi=300, bbox_inches='tight')
    print("\nGraph saved as 'policy_comparison.png'")
    plt.show()
    return 0


if __name__ == '__main__':
    sys.exit(main())
