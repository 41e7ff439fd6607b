import matplotlib.pyplot as plt

from data_loader import load_test_data
from replacement import ALGORITHMS
from simulator import PageTableEngine, run_scenario

SCENARIO_FILES = ['scenarios/belady.txt', 'scenarios/locality.txt']
FRAME_COUNTS = range(1, 7)


def collect_results(scenarios, algorithms=ALGORITHMS):
    """Map scenario name -> algorithm -> fault count."""
    results = {}
    for name, scenario in scenarios.items():
        results[name] = {}
        for algorithm in algorithms:
            engine = run_scenario(scenario, algorithm)
            results[name][algorithm] = engine.fault_count
    return results


def fault_curve(reference, page_count, frame_counts, algorithm):
    faults = []
    for frame_count in frame_counts:
        engine = PageTableEngine(page_count, frame_count, algorithm=algorithm)
        engine.run(reference)
        faults.append(engine.fault_count)
    return faults


def plot_comparison(results, filename='algorithm_comparison.png'):
    names = list(results)
    algorithms = list(next(iter(results.values()))) if results else []

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    x = range(len(algorithms))
    width = 0.8 / max(1, len(names))
    for idx, name in enumerate(names):
        offset = (idx - (len(names) - 1) / 2) * width
        faults = [results[name][alg] for alg in algorithms]
        bars = ax.bar([i + offset for i in x], faults, width, label=name)
        for bar in bars:
            height = bar.get_height()
            ax.text(bar.get_x() + bar.get_width()/2., height,
                    f'{int(height)}', ha='center', va='bottom', fontsize=9)

    ax.set_title('Page Faults')
    ax.set_xticks(list(x))
    ax.set_xticklabels(algorithms)
    ax.grid(axis='y', alpha=0.3)
    ax.legend(loc='upper right', frameon=True)

    plt.tight_layout()
    fig.savefig(filename, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return filename


def plot_fault_curve(reference, page_count, frame_counts, filename='fault_curve.png',
                     algorithms=ALGORITHMS):
    frame_counts = list(frame_counts)

    fig, ax = plt.subplots(figsize=(8, 5))
    for algorithm in algorithms:
        faults = fault_curve(reference, page_count, frame_counts, algorithm)
        ax.plot(frame_counts, faults, marker='o', label=algorithm)

    ax.set_title('Page Faults by Frame Count')
    ax.set_xlabel('Frames')
    ax.set_ylabel('Page Faults')
    ax.set_xticks(frame_counts)
    ax.grid(alpha=0.3)
    ax.legend(frameon=True)

    plt.tight_layout()
    fig.savefig(filename, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return filename


def main():
    scenarios = {filename: load_test_data(filename) for filename in SCENARIO_FILES}

    print("Running simulations...")
    results = collect_results(scenarios)
    print(f"\nGraph saved as '{plot_comparison(results)}'")

    belady = scenarios['scenarios/belady.txt']
    curve = plot_fault_curve(belady.reference, belady.page_count, FRAME_COUNTS)
    print(f"Graph saved as '{curve}'")


if __name__ == '__main__':
    main()
