from backprop_net import Config, TrainingLoop

if __name__ == "__main__":
    config = Config()
    training_loop = TrainingLoop(config)
    training_loop.run()
