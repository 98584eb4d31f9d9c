"""
Visualization Utilities
=======================

This module provides functions for visualizing:
- A layer's image, kernel and feature map side by side
- Kernel weights with their values annotated
"""

import numpy as np
import matplotlib.pyplot as plt


def plot_layer(layer, figsize=(12, 4), cmap='viridis', save_path=None, show=True):
    """
    Plot image, kernel and feature map of a layer.

    Args:
        layer: ConvolutionLayer
        figsize: Figure size
        cmap: Colormap for the image and feature map
        save_path: Path to save figure
        show: Call plt.show() after drawing
    """
    fig, axes = plt.subplots(1, 3, figsize=figsize)

    panels = [
        (layer.image, f'Image ({layer.image_size}x{layer.image_size})', cmap),
        (layer.kernel, f'Kernel ({layer.kernel_size}x{layer.kernel_size})', 'gray'),
        (layer.output, f'Feature map ({layer.output_size}x{layer.output_size})', cmap),
    ]

    for ax, (data, title, panel_cmap) in zip(axes, panels):
        im = ax.imshow(data, cmap=panel_cmap)
        ax.set_title(title, fontsize=12)
        ax.axis('off')
        fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    plt.suptitle(f'Convolution ({layer.padding_mode} padding, bias={layer.bias})', fontsize=14)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Layer plot saved to {save_path}")

    if show:
        plt.show()
    return fig


def visualize_kernel(kernel, num_decimals=2, figsize=(5, 5), save_path=None, show=True):
    """
    Visualize a kernel with each weight written in its cell.

    Args:
        kernel: Kernel weights, shape (K, K)
        num_decimals: Digits shown for each weight
        figsize: Figure size
        save_path: Path to save figure
        show: Call plt.show() after drawing
    """
    kernel = np.asarray(kernel, dtype=np.float64)

    fig, ax = plt.subplots(figsize=figsize)

    im = ax.imshow(kernel, interpolation='nearest', cmap=plt.cm.Blues)
    ax.figure.colorbar(im, ax=ax)

    size = kernel.shape[0]
    ax.set(xticks=np.arange(size),
           yticks=np.arange(size),
           ylabel='Row',
           xlabel='Column',
           title='Kernel')

    # Add text annotations
    thresh = (kernel.max() + kernel.min()) / 2.
    for i in range(size):
        for j in range(size):
            ax.text(j, i, f"{kernel[i, j]:.{num_decimals}f}",
                    ha='center', va='center',
                    color='white' if kernel[i, j] > thresh else 'black')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Kernel visualization saved to {save_path}")

    if show:
        plt.show()
    return fig
