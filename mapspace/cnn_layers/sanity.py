from mapspace.mapping import Network, Workload

'''
Small layer for quick sanity runs.
'''

NN = Network('Sanity')

NN.add('TEST', Workload.conv(64, 1, 40, 3))
