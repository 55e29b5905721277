class Config:

    # =====================
    # Network
    # =====================
    network_shape = [2, 1, 1]
    input_ids = ["x", "y"]
    activation = "relu"
    output_activation = "tanh"
    regularization = "l1"           # None disables regularization
    error = "square"
    init_zero = False
    seed = 1234

    # =====================
    # Training
    # =====================
    iterations = 400
    batch_size = 30
    learning_rate = 0.03
    regularization_rate = 0.0

    # =====================
    # Dataset
    # =====================
    num_train_samples = 500
    num_test_samples = 50
    noise = 0.1

    # =====================
    # Output
    # =====================
    log_path = "out/training.log"
    stats_path = "out/stats.csv"
