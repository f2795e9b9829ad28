import offtrace
import gymnasium


# the MDP
env = gymnasium.make(...)  # any env with Discrete observation and action spaces
env = offtrace.wrappers.TrainMonitor(env)


# behavior policy
pi_behavior = offtrace.RandomPolicy(env)


# learner
learner = offtrace.OffPolicyControl(
    pi_behavior,
    exploration=...,
    discount=...,
    learning_rate=...,
    trace_discount=offtrace.trace_discounts.RetraceLambda(lambda_=...))


for ep in range(100):
    s, info = env.reset()

    for t in range(env.spec.max_episode_steps):
        a = pi_behavior(s)
        s_next, r, terminated, truncated, info = env.step(a)

        # update
        metrics = learner.update(s, a, s_next, r, done=terminated)
        env.record_metrics(metrics)

        if terminated or truncated:
            learner.clear_traces()
            break

        s = s_next
