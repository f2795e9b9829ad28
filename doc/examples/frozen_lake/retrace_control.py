import offtrace
import gymnasium


# the MDP
env = gymnasium.make('FrozenLakeNonSlippery-v0')
env = offtrace.wrappers.TrainMonitor(env)

# show logs from TrainMonitor
offtrace.enable_logging()


# behavior policy: uniformly random
pi_behavior = offtrace.RandomPolicy(env, random_seed=13)


# learner
learner = offtrace.OffPolicyControl(
    pi_behavior,
    exploration=0.5,
    discount=0.9,
    learning_rate=0.5,
    trace_discount=offtrace.trace_discounts.RetraceLambda(lambda_=0.9))


# train
for ep in range(500):
    s, info = env.reset()

    # act greedier as training progresses
    if env.period('exploration', ep_period=50):
        learner.exploration = min(1., learner.exploration + 0.05)

    for t in range(env.spec.max_episode_steps):
        a = pi_behavior(s)
        s_next, r, terminated, truncated, info = env.step(a)

        # small incentive to keep moving
        if s_next == s:
            r = -0.01

        metrics = learner.update(s, a, s_next, r, done=terminated)
        env.record_metrics(metrics)

        if terminated or truncated:
            learner.clear_traces()
            break

        s = s_next


# run env one more time to render
pi = offtrace.EpsilonGreedy(learner, epsilon=0.)
env = gymnasium.make('FrozenLakeNonSlippery-v0', render_mode='ansi')
s, info = env.reset()
print(env.render())

for t in range(env.spec.max_episode_steps):

    # print individual state-action values
    for i, q in enumerate(learner.q[s]):
        print("  q(s,{:s}) = {:.3f}".format('LDRU'[i], q))

    a = pi.mode(s)
    s, r, terminated, truncated, info = env.step(a)

    print(env.render())

    if terminated or truncated:
        break
