# torch_interop.py
# a Network is the same thing as nn.Sequential(Linear, ReLU, Linear, ReLU, ...)

import torch
from torch import nn

from .errors import TopologyError
from .layer import Layer
from .network import Network
from .neuron import Neuron


def to_sequential(network):
    modules = []
    for layer in network.layers:
        linear = nn.Linear(layer.input_size, layer.output_size)  # nn.Linear(input, output)
        with torch.no_grad():
            # torch keeps W as (nout, nin), one row per neuron
            linear.weight.copy_(torch.tensor([n.weights.tolist() for n in layer.neurons], dtype=torch.float32))
            linear.bias.copy_(torch.tensor([float(n.bias) for n in layer.neurons], dtype=torch.float32))
        modules.append(linear)
        modules.append(nn.ReLU())
    return nn.Sequential(*modules)


def from_sequential(module):
    children = list(module.children()) if isinstance(module, nn.Sequential) else [module]

    layers = []
    for i, child in enumerate(children):
        if isinstance(child, nn.ReLU):
            if i == 0 or not isinstance(children[i - 1], nn.Linear):
                raise TopologyError(f"ReLU at position {i} does not follow a Linear")
            continue
        if not isinstance(child, nn.Linear):
            raise TopologyError(f"unsupported module {type(child).__name__} at position {i}")
        if i + 1 >= len(children) or not isinstance(children[i + 1], nn.ReLU):
            raise TopologyError(f"Linear at position {i} is not followed by a ReLU")

        W = child.weight.detach().cpu().numpy()
        if child.bias is not None:
            b = child.bias.detach().cpu().numpy()
        else:
            b = [0.0] * child.out_features
        layers.append(Layer(Neuron(W[j], b[j]) for j in range(child.out_features)))

    return Network(layers)
