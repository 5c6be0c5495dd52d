from mapspace.mapping import Network, Workload

'''
AlexNet

Krizhevsky, Sutskever, and Hinton, 2012

Convolution layers as listed in the Eyeriss ISCA paper, Table II. The two
GPU halves of conv2 are kept as separate layers.
'''

NN = Network('AlexNet')

NN.add('ALEX_conv1', Workload.conv(48, 96, 57, 3))
NN.add('ALEX_conv2_1', Workload.conv(48, 128, 27, 5))
NN.add('ALEX_conv2_2', Workload.conv(48, 128, 27, 5))
NN.add('ALEX_conv3', Workload.conv(256, 384, 13, 3))
NN.add('ALEX_conv4', Workload.conv(192, 384, 13, 3))
NN.add('ALEX_conv5', Workload.conv(192, 256, 13, 3))
