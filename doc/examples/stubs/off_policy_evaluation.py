import offtrace
import gymnasium


# the MDP
env = gymnasium.make(...)  # any env with Discrete observation and action spaces
env = offtrace.wrappers.TrainMonitor(env)


# target and behavior policies
pi_targ = offtrace.TabularPolicy(env, probs=...)
pi_behavior = offtrace.RandomPolicy(env)


# learner
learner = offtrace.OffPolicyEvaluation(
    pi_targ,
    pi_behavior,
    discount=...,
    learning_rate=...,
    trace_discount=offtrace.trace_discounts.TreeBackupLambda(lambda_=...))


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
